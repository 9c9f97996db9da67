"""
Structured JSON logging configuration.
Every repository call logs through the `gamereview` logger as one JSON line.
"""
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from gamereview.core.config import settings

# Attributes every LogRecord carries; anything else came in through extra={}
_RESERVED_ATTRS = frozenset(
    [
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    ]
)


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.
    Outputs logs in JSON format with standard fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, default=str)


def setup_logging() -> logging.Logger:
    """
    Configure and return the package logger.
    Uses JSON formatting for structured logs.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper())

    logger = logging.getLogger("gamereview")
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates on re-import
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(JSONFormatter())
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


# Global logger instance
logger = setup_logging()


# Helper functions for common logging patterns
def log_error(message: str, error: Exception = None, **kwargs):
    """Log an error with optional exception details."""
    extra = kwargs.copy()
    if error:
        extra["error_type"] = type(error).__name__
        extra["error_message"] = str(error)

    logger.error(message, extra=extra, exc_info=error is not None)


def log_info(message: str, **kwargs):
    """Log an info message with extra fields."""
    logger.info(message, extra=kwargs)


def log_warning(message: str, **kwargs):
    """Log a warning message with extra fields."""
    logger.warning(message, extra=kwargs)


def log_debug(message: str, **kwargs):
    """Log a debug message with extra fields."""
    logger.debug(message, extra=kwargs)
