"""
Clicked store: ids of recommended threads the reader already clicked.

Clicked threads are hidden from later recommendations until a force refresh
clears the set.
"""

from typing import Iterable, Optional, Protocol, Set


class ClickedStore(Protocol):
    """Protocol for the clicked-thread set."""

    async def get(self) -> Set[str]:
        ...

    async def add(self, thread_id: str) -> None:
        ...

    async def clear(self) -> None:
        ...


class InMemoryClickedStore:
    def __init__(self, thread_ids: Optional[Iterable[str]] = None):
        self._ids: Set[str] = set(thread_ids or ())

    async def get(self) -> Set[str]:
        return set(self._ids)

    async def add(self, thread_id: str) -> None:
        self._ids.add(thread_id)

    async def clear(self) -> None:
        self._ids.clear()
