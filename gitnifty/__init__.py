"""
gitnifty - Façade asynchrone et typée pour la ligne de commande git.

Modules disponibles:
- git: Façade Git et flags typés par opération
- commands: Construction et exécution des lignes de commande
  (CommandBuilder, ShellCommandExecutor)
- config: Options de session (GitOptions, chargement TOML/JSON)
- errors: Exceptions (CommandExecutionError, ConfigurationError)
- logging: Gestion des logs (Logger, FileLogger)
"""

__version__ = "1.0.0"

from gitnifty.logging import Logger, FileLogger
from gitnifty.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    CommandExecutionError,
)
from gitnifty.config import (
    ConfigLoader,
    FileConfigLoader,
    GitOptionsLoader,
    GitOptions,
)
from gitnifty.commands import (
    CommandResult,
    CommandExecutor,
    CommandBuilder,
    CommandFormatter,
    PlainCommandFormatter,
    ShellCommandExecutor,
)
from gitnifty.git import (
    Git,
    PushTarget,
    BranchFlag,
    CheckoutFlag,
    MergeFlag,
    PushFlag,
    ResetMode,
    RestoreFlag,
    SourceFlag,
    TagFlag,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "CommandExecutionError",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "GitOptionsLoader",
    "GitOptions",
    # Commands
    "CommandResult",
    "CommandExecutor",
    "CommandBuilder",
    "CommandFormatter",
    "PlainCommandFormatter",
    "ShellCommandExecutor",
    # Git - Façade
    "Git",
    "PushTarget",
    # Git - Flags
    "BranchFlag",
    "CheckoutFlag",
    "MergeFlag",
    "PushFlag",
    "ResetMode",
    "RestoreFlag",
    "SourceFlag",
    "TagFlag",
]
