"""
Result type for construction paths that report errors instead of raising.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from gamereview.core.exceptions import AppException

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a built value or the error that stopped it being built.
    Exactly one of `value` and `error` is set.
    """

    value: Optional[T] = None
    error: Optional[AppException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AppException) -> "Result[T]":
        return cls(error=error)
