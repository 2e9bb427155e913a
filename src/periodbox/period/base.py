from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .day import Day


class TimePeriod(ABC):
    """
    Capability shared by Day, Week and Month: a total order within the type,
    single-step navigation, and the first day of the period.

    Rich comparisons are derived from ``compare_to``.  Periods of different
    types are not comparable (the operators return ``NotImplemented``).
    """

    __slots__ = ()

    @property
    @abstractmethod
    def first_day(self) -> Day: ...

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        """Negative, zero or positive as self is before, equal to or after other."""

    @abstractmethod
    def inc(self) -> TimePeriod: ...

    @abstractmethod
    def dec(self) -> TimePeriod: ...

    # ── ordering ────────────────────────────────────────────────────────

    def _comparable(self, other: Any) -> bool:
        return type(other) is type(self)

    def __lt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) >= 0
