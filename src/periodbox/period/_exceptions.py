from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all period, interval and timestamp errors."""


class ParseError(CalendarError, ValueError):
    """A day or timestamp string could not be parsed."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        message = f"Cannot parse {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class IllegalArgumentError(CalendarError, ValueError):
    """An argument is malformed beyond what the callee can interpret."""
