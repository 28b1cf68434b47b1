"""
Logging Configuration
Provides structured logging for the view component
"""
import logging
import json
from typing import List, Optional
from datetime import datetime

_RESERVED_RECORD_FIELDS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'getMessage', 'message', 'taskName',
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Initialize JSON formatter

        Args:
            include_fields: Additional record attributes to always include
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed through `extra=`
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    @staticmethod
    def setup_logger(
        name: str = 'viewkit',
        format_type: str = None,
        level: Optional[int] = None,
        stream=None,
        environment: Optional[str] = None
    ) -> logging.Logger:
        """
        Setup a logger writing to a stream handler

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            level: Logging level (defaults to the level of the environment)
            stream: Stream to write to (defaults to stderr)
            environment: Environment name used when no level is given

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('viewkit', format_type='json', level=logging.DEBUG)
        """
        from viewkit.defaults import DEFAULT_LOG_ENVIRONMENT, DEFAULT_LOG_FORMAT, DEFAULT_LOG_TEXT_FORMAT
        if format_type is None:
            format_type = DEFAULT_LOG_FORMAT

        # Determine log level based on environment
        if level is None:
            level = LoggerConfig.get_level_by_environment(environment or DEFAULT_LOG_ENVIRONMENT)

        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        handler = logging.StreamHandler(stream)
        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(DEFAULT_LOG_TEXT_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'staging', 'development', 'local', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'local': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
