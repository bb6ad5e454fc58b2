"""Core infrastructure: configuration, logging and the singleton helper."""

from .config import Config, get_config
from .logging_config import LoggingConfig

__all__ = ["Config", "get_config", "LoggingConfig"]
