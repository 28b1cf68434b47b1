"""
Logging Package
Structured logging for the view component

Provides drop-in replacement for standard logging that keeps every
logger of the component under the 'viewkit' namespace.
"""
from viewkit.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

ROOT_LOGGER_NAME = 'viewkit'


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module-based names (containing '.') are used as given. Bare names are
    nested under the 'viewkit' logger so that LoggerConfig.setup_logger()
    on the component root covers them. None returns the component root.

    Args:
        name: Logger name

    Returns:
        Logger instance

    Example:
        from viewkit.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Resolved view", extra={'uri': uri})
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if '.' not in name and name != ROOT_LOGGER_NAME:
        name = f'{ROOT_LOGGER_NAME}.{name}'

    return logging.getLogger(name)
