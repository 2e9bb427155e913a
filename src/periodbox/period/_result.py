from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from ._exceptions import CalendarError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """
    Success-or-error outcome of a construction or parse.

    Exactly one of ``value`` / ``error`` is set.  ``unwrap()`` hands back the
    value or re-raises the captured error.
    """

    value: T | None = None
    error: CalendarError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: CalendarError) -> Result[T]:
        return cls(error=error)

    @classmethod
    def capture(cls, fn: Callable[[], T]) -> Result[T]:
        """Run ``fn``; a ``CalendarError`` it raises becomes a failed Result."""
        try:
            return cls.success(fn())
        except CalendarError as exc:
            return cls.failure(exc)
