"""
Custom exceptions for the data layer.
Every exception maps to one of the standard error codes.

None of these derive from ValueError, so pydantic lets them escape field
validators untouched and callers see the original kind.
"""
from typing import Optional, Dict, Any

from gamereview.schemas.error import ErrorCode, ErrorDetail


class AppException(Exception):
    """
    Base exception class for all data layer exceptions.
    All custom exceptions should inherit from this.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_detail(self) -> ErrorDetail:
        """Render this exception as an ErrorDetail."""
        return ErrorDetail(
            code=self.error_code,
            message=self.message,
            details=self.details or None,
        )


class InvalidArgumentException(AppException):
    """Raised when input is malformed, empty or insecure."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.INVALID_ARGUMENT, message, details)


class RangeException(AppException):
    """Raised when well-formed input is out of bounds (too long, bad date...)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.OUT_OF_RANGE, message, details)


class TypeMismatchException(AppException):
    """Raised when a value of the wrong type is supplied."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.TYPE_MISMATCH, message, details)


class StorageException(AppException):
    """Raised when the relational store fails or a stored row cannot be read back."""

    def __init__(
        self, message: str = "Storage operation failed", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(ErrorCode.STORAGE_ERROR, message, details)
