"""Debug bookkeeping of nested locks held by processes."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field


def _now_microseconds() -> int:
    return time.time_ns() // 1000


@dataclass
class LockItem:
    """A stack of process names holding the lock with the given id."""

    id: int
    data: deque[str] = field(default_factory=deque)
    date: int = field(default_factory=_now_microseconds)

    def __str__(self) -> str:
        return "->".join(self.data)

    def _exit(self) -> bool:
        self.data.pop()
        return not self.data

    def _copy(self) -> LockItem:
        return LockItem(id=self.id, data=deque(self.data), date=self.date)


class Locks:
    """Tracks which processes hold which locks."""

    def __init__(self) -> None:
        self._data: dict[int, LockItem] = {}

    def new_lock(self, id: int, process: str) -> None:
        """Record that `process` entered the lock `id`."""
        item = self._data.get(id)
        if item is None:
            item = LockItem(id=id)
            self._data[id] = item
        item.data.append(process)

    def exit(self, id: int) -> None:
        """Drop the latest entry of lock `id`; forget the lock once it is empty."""
        item = self._data.get(id)
        if item is not None and item._exit():
            del self._data[id]

    def get_all(self) -> list[LockItem]:
        """Return copies of all currently held locks."""
        return [item._copy() for item in self._data.values()]