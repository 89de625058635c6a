"""
Logging Utilities
=================

Centralized logging configuration, optionally driven by loaded straps.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional

from ..config.errors import TypeConversionError
from ..config.lookup import Straps

APP_LOGGER_NAME = 'straps'


def setup_logging(
    straps: Optional[Straps] = None,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_file_size: str = "10MB",
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up centralized logging configuration.

    Args:
        straps: Loaded straps; LogLevel, LogFile, LogMaxFileSize and
            LogBackupCount override the arguments below when present
        log_level: Logging level
        log_file: Log file path
        max_file_size: Maximum log file size
        backup_count: Number of backup files to keep

    Returns:
        Configured logger

    Raises:
        TypeConversionError: If the log level or the file size is not valid
    """
    if straps is not None:
        log_level = straps.get_string('LogLevel', default=log_level)
        log_file = straps.get_string('LogFile', default=log_file)
        max_file_size = straps.get_string('LogMaxFileSize', default=max_file_size)
        backup_count = straps.get_int('LogBackupCount', default=backup_count)

    # Convert log level string to logging constant
    numeric_level = logging.getLevelName(log_level.upper())
    if not isinstance(numeric_level, int):
        raise TypeConversionError('LogLevel', log_level, 'log level')

    max_bytes = 0
    if log_file:
        try:
            max_bytes = _parse_size(max_file_size)
        except (ValueError, OverflowError) as e:
            raise TypeConversionError('LogMaxFileSize', max_file_size, 'file size') from e

    # Create logs directory if it doesn't exist
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.info(f"Logging initialized - Level: {log_level}, File: {log_file}")

    return app_logger


def _parse_size(size_str: str) -> int:
    """
    Parse size string to bytes.

    Args:
        size_str: Size string (e.g., '10MB', '1GB')

    Returns:
        Size in bytes
    """
    size_str = size_str.upper().strip()

    if size_str.endswith('KB'):
        return int(float(size_str[:-2]) * 1024)
    elif size_str.endswith('MB'):
        return int(float(size_str[:-2]) * 1024 * 1024)
    elif size_str.endswith('GB'):
        return int(float(size_str[:-2]) * 1024 * 1024 * 1024)
    else:
        # Assume bytes
        return int(size_str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
