from __future__ import annotations


class TstampSet:
    """
    Hands out unique millisecond timestamps.

    Asking for a value already handed out returns the next free one above
    it, so sensor events recorded in the same millisecond keep distinct keys.
    """

    def __init__(self) -> None:
        self._issued: set[int] = set()

    def get_unique_tstamp(self, tstamp: int) -> int:
        current = int(tstamp)
        while current in self._issued:
            current += 1
        self._issued.add(current)
        return current

    def __contains__(self, tstamp: object) -> bool:
        return tstamp in self._issued

    def __len__(self) -> int:
        return len(self._issued)

    def __repr__(self) -> str:
        return f"TstampSet(issued={len(self._issued)})"
