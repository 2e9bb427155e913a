from __future__ import annotations

from typing import Any

from periodbox.period._exceptions import CalendarError, IllegalArgumentError


class IllegalIntervalError(CalendarError, ValueError):
    """An interval was requested whose start lies after its end."""

    def __init__(self, start: Any, end: Any, label: str = "period") -> None:
        self.start = start
        self.end = end
        super().__init__(f"Start {label} {start} is later than end {label} {end}")


class NoMoreElementsError(CalendarError, StopIteration):
    """The interval cursor has already produced its last period."""


class UnsupportedOperationError(CalendarError, NotImplementedError):
    """The operation is not offered by this object (e.g. cursor removal)."""
