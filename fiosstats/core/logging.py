"""Logging utilities for fiosstats modules."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = 'FIOSSTATS_LOG_LEVEL'
LEGACY_LOG_LEVEL_ENV = 'MY_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'info'
LOG_FORMAT = '[%(asctime)s %(levelname)s %(name)s] %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    This ensures that loggers work with basicConfig() without needing
    explicit setup_logging() calls. The logger will:
    - Propagate to root logger (default behavior)
    - Only set a default level if root logger has no handlers

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    # Only set default level if root logger has no handlers
    # (i.e., basicConfig hasn't been called yet)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger


def level_from_env(default: str = DEFAULT_LOG_LEVEL) -> int:
    """Resolve the log level named by FIOSSTATS_LOG_LEVEL.

    MY_LOG_LEVEL is read when FIOSSTATS_LOG_LEVEL is unset. Unknown names
    fall back to the default level.
    """
    value = os.environ.get(LOG_LEVEL_ENV) or os.environ.get(LEGACY_LOG_LEVEL_ENV) or default
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(default.upper())


def configure_logging(level: Optional[int] = None) -> int:
    """
    Configure root logging for command line use.

    Args:
        level: Explicit level; read from the environment when omitted

    Returns:
        The level that was applied
    """
    if level is None:
        level = level_from_env()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('fiosstats').setLevel(level)
    return level
