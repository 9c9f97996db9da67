"""
Shared field validators.

Pure functions used by both entities. Each returns the canonical form of its
input or raises one of the data layer exceptions.
"""
import html
import re
import uuid
from datetime import datetime, timezone
from typing import Any

import bleach
from email_validator import validate_email, EmailNotValidError

from gamereview.core.exceptions import (
    InvalidArgumentException,
    RangeException,
    TypeMismatchException,
)

# Storage form for timestamps: Y-m-d H:i:s.u
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_DATETIME_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[ T](\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,6}))?$"
)
_HEX_PATTERN = re.compile(r"[0-9a-f]+")


def _label(field: str) -> str:
    return field.replace("_", " ")


def validate_uuid(value: Any, field: str = "id") -> uuid.UUID:
    """
    Normalize an identifier to uuid.UUID.

    Accepts a UUID, its textual form (with or without dashes) or its 16 raw
    bytes as read back from a BINARY(16) column.
    """
    if isinstance(value, uuid.UUID):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != 16:
            raise InvalidArgumentException(
                f"{_label(field)} is not a valid uuid",
                details={"field": field, "byte_length": len(raw)},
            )
        return uuid.UUID(bytes=raw)

    if isinstance(value, str):
        try:
            return uuid.UUID(value.strip())
        except ValueError:
            raise InvalidArgumentException(
                f"{_label(field)} is not a valid uuid",
                details={"field": field, "value": value},
            ) from None

    raise InvalidArgumentException(
        f"{_label(field)} must be a uuid, its text or its bytes",
        details={"field": field, "type": type(value).__name__},
    )


def validate_datetime(value: Any, field: str = "date") -> datetime:
    """
    Normalize a timestamp to a naive UTC datetime.

    Strings must look like ``2024-06-01 13:45:00`` with optional fractional
    seconds. A string that is well-formed but names a day or time that does
    not exist raises RangeException.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    if not isinstance(value, str):
        raise InvalidArgumentException(
            f"{_label(field)} is not a valid date",
            details={"field": field, "type": type(value).__name__},
        )

    match = _DATETIME_PATTERN.match(value.strip())
    if match is None:
        raise InvalidArgumentException(
            f"{_label(field)} is not a valid date",
            details={"field": field, "value": value},
        )

    year, month, day, hour, minute, second, fraction = match.groups()
    microsecond = int((fraction or "0").ljust(6, "0"))
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second), microsecond
        )
    except ValueError as e:
        raise RangeException(
            f"{_label(field)} is not a real date",
            details={"field": field, "value": value, "reason": str(e)},
        ) from e


def format_datetime(value: datetime) -> str:
    """Render a timestamp in storage form."""
    return value.strftime(DATETIME_FORMAT)


def sanitize_text(value: Any, field: str) -> str:
    """
    Trim a string and strip any markup from it.

    bleach entity-escapes what it leaves behind, so the result is unescaped
    again; ``R&D`` stays ``R&D``. Cleaning repeats until the text is stable,
    which keeps escaped markup such as ``&lt;b&gt;`` from surviving a second pass.
    """
    if not isinstance(value, str):
        raise TypeMismatchException(
            f"{_label(field)} must be a string",
            details={"field": field, "type": type(value).__name__},
        )
    cleaned = value.strip()
    while True:
        stripped = html.unescape(
            bleach.clean(cleaned, tags=set(), attributes={}, strip=True)
        ).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def validate_text(value: Any, field: str, max_length: int) -> str:
    """Sanitize free text and enforce that it is non-empty and fits its column."""
    cleaned = sanitize_text(value, field)
    if not cleaned:
        raise InvalidArgumentException(
            f"{_label(field)} is empty or insecure", details={"field": field}
        )
    if len(cleaned) > max_length:
        raise RangeException(
            f"{_label(field)} is too large",
            details={"field": field, "max_length": max_length, "length": len(cleaned)},
        )
    return cleaned


def validate_email_address(value: Any, field: str, max_length: int) -> str:
    """Validate email syntax (no deliverability lookup) and column length."""
    if not isinstance(value, str):
        raise TypeMismatchException(
            f"{_label(field)} must be a string",
            details={"field": field, "type": type(value).__name__},
        )

    candidate = value.strip()
    if not candidate:
        raise InvalidArgumentException(
            f"{_label(field)} is empty or insecure", details={"field": field}
        )

    try:
        email = validate_email(candidate, check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise InvalidArgumentException(
            f"{_label(field)} is empty or insecure",
            details={"field": field, "reason": str(e)},
        ) from e

    if len(email) > max_length:
        raise RangeException(
            f"{_label(field)} is too large",
            details={"field": field, "max_length": max_length, "length": len(email)},
        )
    return email


def validate_hex_token(value: Any, field: str, length: int) -> str:
    """Trim and lower-case a token; it must be exactly `length` hex digits."""
    if not isinstance(value, str):
        raise TypeMismatchException(
            f"{_label(field)} must be a string",
            details={"field": field, "type": type(value).__name__},
        )

    token = value.strip().lower()
    if _HEX_PATTERN.fullmatch(token) is None:
        raise RangeException(
            f"{_label(field)} must be hexadecimal", details={"field": field}
        )
    if len(token) != length:
        raise RangeException(
            f"{_label(field)} must be {length} characters",
            details={"field": field, "length": len(token), "expected_length": length},
        )
    return token


def validate_int_range(value: Any, field: str, minimum: int, maximum: int) -> int:
    """Require a real int (bool excluded) within [minimum, maximum]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchException(
            f"{_label(field)} must be an integer",
            details={"field": field, "type": type(value).__name__},
        )
    if value < minimum or value > maximum:
        raise RangeException(
            f"{_label(field)} must be between {minimum} and {maximum}",
            details={"field": field, "value": value, "minimum": minimum, "maximum": maximum},
        )
    return value
