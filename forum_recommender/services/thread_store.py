"""
Thread store: the thread catalog and the reader's read/disliked history.

The engine only reads from it. Records are plain dicts (camelCase keys) as
returned by the host application; the engine validates them into models.
"""

from typing import Any, Dict, List, Optional, Protocol


class ThreadStore(Protocol):
    """Protocol for thread catalog and reading history access."""

    async def get_all_threads(self) -> List[Dict[str, Any]]:
        """Return every known thread."""
        ...

    async def get_all_read_events(self) -> List[Dict[str, Any]]:
        """Return every read event of the reader."""
        ...

    async def get_all_disliked_threads(self) -> List[Dict[str, Any]]:
        """Return every thread the reader marked as disliked."""
        ...


class InMemoryThreadStore:
    """Thread store backed by in-process lists. Used for tests and local runs."""

    def __init__(
        self,
        threads: Optional[List[Any]] = None,
        read_events: Optional[List[Any]] = None,
        disliked_threads: Optional[List[Any]] = None,
    ):
        self.threads = list(threads or [])
        self.read_events = list(read_events or [])
        self.disliked_threads = list(disliked_threads or [])

    async def get_all_threads(self) -> List[Any]:
        return list(self.threads)

    async def get_all_read_events(self) -> List[Any]:
        return list(self.read_events)

    async def get_all_disliked_threads(self) -> List[Any]:
        return list(self.disliked_threads)
