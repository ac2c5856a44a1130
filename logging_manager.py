#!/usr/bin/env python3
"""
Logging Manager for LLM Spell Correction

Provides centralized logging setup using the Loguru framework. Diagnostics go
to stderr (and optionally a rotating file) so they never mix with the corrected
text written to stdout.

Dependencies:
- loguru: Logging framework
- omegaconf: Configuration management
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from omegaconf import DictConfig


class LoggingManager:
    """Loguru setup driven by the `logging` section of the Hydra config.

    Example:
        log_manager = LoggingManager()
        log_manager.setup_logging(config)
    """

    def __init__(self):
        self.config: Optional[DictConfig] = None

    def setup_logging(self, cfg: DictConfig):
        """Configure Loguru logging based on Hydra configuration.

        Removes the default Loguru handler and installs a console handler and,
        when `logging.file` is set, a rotating file handler.

        Logging Configuration Options:
            - level: DEBUG, INFO, WARNING, ERROR, CRITICAL
            - format: simple, detailed, json
            - file: Optional file path for file logging
            - rotation: Log rotation size (default: 10 MB)
            - retention: Log retention period (default: 7 days)
            - colorize: Enable/disable console colors (default: True)
        """
        self.config = cfg
        log_config = cfg.logging

        logger.remove()

        logger.add(
            sys.stderr,
            format=self._get_console_format(log_config.format),
            level=log_config.level.upper(),
            colorize=log_config.get("colorize", True),
            backtrace=False,
            diagnose=False
        )

        if log_config.get("file"):
            self._setup_file_logging(log_config)

        logger.debug("Loguru logging configured",
                     level=log_config.level,
                     format=log_config.format,
                     file=log_config.get("file") or "console-only")

    def _get_console_format(self, format_type: str) -> str:
        """Get console logging format string based on configuration."""
        if format_type == "simple":
            return "<level>{level}</level> - {message}"
        elif format_type == "json":
            return "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> | {message} | {extra}"
        else:  # detailed
            return "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

    def _setup_file_logging(self, log_config: DictConfig):
        """Setup file logging with rotation and compression."""
        file_path = Path(log_config.file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            file_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=log_config.level.upper(),
            rotation=log_config.get("rotation", "10 MB"),
            retention=log_config.get("retention", "7 days"),
            compression="gz",
            serialize=log_config.format == "json"
        )


_logging_manager = LoggingManager()


def setup_logging(cfg: DictConfig):
    """Setup global logging configuration using the module-level LoggingManager."""
    _logging_manager.setup_logging(cfg)
