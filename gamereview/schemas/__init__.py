"""
Pydantic schemas package.

Entities live in gamereview.schemas.reviewer and gamereview.schemas.review;
only the error schemas are re-exported here because core.exceptions imports them.
"""
from gamereview.schemas.error import ErrorCode, ErrorDetail

__all__ = [
    "ErrorCode",
    "ErrorDetail",
]
