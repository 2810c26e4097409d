"""Module de configuration."""

from gitnifty.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    GitOptionsLoader,
)
from gitnifty.config.options import GitOptions

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "GitOptionsLoader",
    "GitOptions",
]
