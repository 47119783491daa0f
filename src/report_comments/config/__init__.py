"""Configuration, paths and logging setup."""

from .settings import CommentSettings, ConfigurationError, load_env_file
from .logging_config import ApplicationLogger, setup_logging

__all__ = [
    "ApplicationLogger",
    "CommentSettings",
    "ConfigurationError",
    "load_env_file",
    "setup_logging",
]
