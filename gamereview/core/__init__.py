"""
Core utilities package.
Exports configuration, logging, and exceptions.
"""
from gamereview.core.config import settings
from gamereview.core.logging import logger, log_error, log_info, log_warning, log_debug
from gamereview.core.exceptions import (
    AppException,
    InvalidArgumentException,
    RangeException,
    TypeMismatchException,
    StorageException,
)

__all__ = [
    "settings",
    "logger",
    "log_error",
    "log_info",
    "log_warning",
    "log_debug",
    "AppException",
    "InvalidArgumentException",
    "RangeException",
    "TypeMismatchException",
    "StorageException",
]
