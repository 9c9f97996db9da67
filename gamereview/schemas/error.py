"""
Standard error schemas.
Every error raised by the data layer can be rendered in this format.
"""
from typing import Optional, Dict, Any
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class ErrorCode(str, Enum):
    """Error kinds used throughout the data layer."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"  # malformed or insecure input
    OUT_OF_RANGE = "OUT_OF_RANGE"  # well-formed but out of bounds
    TYPE_MISMATCH = "TYPE_MISMATCH"  # wrong type supplied
    STORAGE_ERROR = "STORAGE_ERROR"  # the relational store failed or rejected


class ErrorDetail(BaseModel):
    """
    Error detail object.
    Contains the error code, human-readable message, and optional additional details.

    Example:
    {
        "code": "OUT_OF_RANGE",
        "message": "review console is too large",
        "details": {"field": "review_console", "max_length": 16}
    }
    """

    code: ErrorCode = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")

    model_config = ConfigDict(use_enum_values=True)
