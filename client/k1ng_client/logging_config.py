"""
Logging configuration for the K1NG client

The library only emits records through loggers under the "k1ng_client"
namespace and never attaches handlers itself. Applications (and the CLI)
call setup_logging() to decide where those records go.
"""

import logging
import logging.handlers
import os
import sys

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

PACKAGE_LOGGER = "k1ng_client"


def resolve_log_level(log_level=None) -> int:
    """
    Turn a level name into a logging level number.

    Falls back to the LOG_LEVEL environment variable, then WARNING.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS
    """
    if log_level is None:
        log_level = os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL

    name = str(log_level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {log_level!r}, expected one of: {', '.join(LOG_LEVELS)}")
    return logging.getLevelName(name)


def setup_logging(log_level=None, log_file=None, max_bytes=1024*1024, backup_count=3):
    """
    Route the client's log records to stderr or a rotating file.

    Args:
        log_level: Level name; defaults to LOG_LEVEL env or WARNING
        log_file: Path to log file; defaults to K1NG_LOG_FILE env, else stderr
        max_bytes: Maximum size of log file before rotation (default 1MB)
        backup_count: Number of rotated files to keep (default 3)

    Returns:
        The package logger

    Raises:
        ValueError: If the log level is unknown
    """
    level = resolve_log_level(log_level)

    if log_file is None:
        log_file = os.environ.get("K1NG_LOG_FILE")

    if log_file:
        handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    else:
        # stdout carries command output
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.debug(f"Logging initialized - Level: {logging.getLevelName(level)}, Output: {log_file or 'stderr'}")
    return logger


def get_logger(name):
    return logging.getLogger(name)
