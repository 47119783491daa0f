"""
Centralized logging configuration for report-comments.
Provides consistent logging setup with file rotation and configurable log levels.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .paths import app_log_dir
from .settings import CommentSettings


class ApplicationLogger:
    """Centralized logging configuration for the application."""

    def __init__(self, app_name: str = "report_comments", log_dir: Optional[Path] = None):
        self.app_name = app_name
        self.log_dir = log_dir or app_log_dir()
        self.log_dir.mkdir(parents=True, exist_ok=True)

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"{self.app_name}.log"

    def setup(self, debug: bool = False) -> logging.Logger:
        """Configure application-wide logging."""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

        # Clear existing handlers
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        file_handler = logging.handlers.RotatingFileHandler(
            self.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - "
                "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
        )

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        self._configure_module_loggers(debug)

        root_logger.info("Logging initialized - Debug: %s, Log dir: %s", debug, self.log_dir)
        return root_logger

    def _configure_module_loggers(self, debug: bool) -> None:
        """Configure logging levels for specific modules."""
        module_configs = {
            "report_comments.core": logging.DEBUG if debug else logging.INFO,
            "report_comments.config": logging.INFO,
        }
        for module, level in module_configs.items():
            logging.getLogger(module).setLevel(level)

        # Suppress noisy libraries
        logging.getLogger("dotenv").setLevel(logging.WARNING)


def setup_logging(debug: Optional[bool] = None, log_dir: Optional[Path] = None) -> logging.Logger:
    """Set up logging with the default application configuration.

    When ``debug`` is not given it comes from ``CommentSettings.debug``.
    """
    if debug is None:
        debug = CommentSettings.from_settings().debug
    return ApplicationLogger(log_dir=log_dir).setup(debug=debug)


__all__ = ["ApplicationLogger", "setup_logging"]
