#!/usr/bin/env python3
"""Centralized logging utilities with consistent formatting."""

import logging
import sys
from pathlib import Path
from typing import Any

# Global configuration
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LEVEL = logging.INFO
_CONFIGURED_LOGGERS: set[str] = set()


def setup_logger(
    name: str,
    level: int | None = None,
    format_string: str | None = None,
    stream: Any = None,
) -> logging.Logger:
    """Set up a logger with consistent formatting.

    Args:
        name: Logger name (e.g., 'modlocale.applier')
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        stream: Output stream (default: sys.stdout)

    Returns:
        Configured logger instance

    Example:
        >>> from modlocale.core.logging_utils import setup_logger
        >>> logger = setup_logger("modlocale.catalog")
        >>> logger.info("Loaded translations for 5 languages")
    """
    logger = logging.getLogger(name)

    # Only configure once per logger name
    if name in _CONFIGURED_LOGGERS:
        return logger

    if level is None:
        level = _DEFAULT_LEVEL
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        formatter = logging.Formatter(
            format_string or _LOG_FORMAT,
            datefmt=_LOG_DATE_FORMAT,
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Prevent propagation to root logger (avoid duplicate logs)
    logger.propagate = False

    _CONFIGURED_LOGGERS.add(name)

    return logger


def set_global_log_level(level: int):
    """Set log level for all configured loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
    """
    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level

    for logger_name in _CONFIGURED_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def configure_file_logging(
    log_dir: str | Path = "runtime",
    log_file: str = "modlocale.log",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 3,
):
    """Configure file-based logging with rotation.

    Args:
        log_dir: Directory for log files
        log_file: Log file name
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep
    """
    from logging.handlers import RotatingFileHandler

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path / log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))

    for logger_name in _CONFIGURED_LOGGERS:
        logger = logging.getLogger(logger_name)
        has_file_handler = any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        if not has_file_handler:
            logger.addHandler(file_handler)


def configure_logging(config: dict[str, Any]):
    """Apply the ``logging`` section of a loaded config.

    Args:
        config: Configuration dict (as returned by load_config)
    """
    log_config = config.get("logging", {}) or {}
    level_str = str(log_config.get("level", "INFO"))
    set_global_log_level(getattr(logging, level_str.upper(), logging.INFO))

    log_file = log_config.get("file")
    if log_file:
        path = Path(log_file)
        configure_file_logging(
            log_dir=path.parent,
            log_file=path.name,
            max_bytes=int(log_config.get("max_size_mb", 10)) * 1024 * 1024,
            backup_count=int(log_config.get("backup_count", 3)),
        )


def log_event(
    logger: logging.Logger,
    event_name: str,
    data: dict[str, Any] | None = None,
):
    """Log a structured event.

    Args:
        logger: Logger instance
        event_name: Event name (e.g., 'locale_changed')
        data: Optional event data

    Example:
        >>> log_event(logger, "locale_changed", {"locale": "ja"})
    """
    data_str = ""
    if data:
        data_str = " " + " ".join(f"{k}={v}" for k, v in data.items())
    logger.info(f"[EVENT] {event_name}{data_str}")
