"""Module de logging."""

from gitnifty.logging.base import Logger
from gitnifty.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
