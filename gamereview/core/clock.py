"""
Timestamp providers.

Anything that needs "now" takes a Clock so tests can pin the time.
"""
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the form timestamps are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports `moment`."""

    def _clock() -> datetime:
        return moment

    return _clock
