"""Module de gestion des erreurs."""

from gitnifty.errors.exceptions import (ApplicationError,
                                        ConfigurationError,
                                        FileConfigurationError,
                                        CommandExecutionError)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "CommandExecutionError",
]
