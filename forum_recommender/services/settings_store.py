"""
Settings store: key/value reader preferences (disliked tags, preferred tags,
recommendation count, algorithm).
"""

from typing import Any, Dict, Iterable, List, Optional, Protocol


class SettingsStore(Protocol):
    """Protocol for preference persistence."""

    async def get(self, keys: List[str]) -> Dict[str, Any]:
        """Return the stored values for keys; missing keys are omitted."""
        ...

    async def set(self, values: Dict[str, Any]) -> None:
        """Store values, overwriting existing keys."""
        ...

    async def remove(self, keys: List[str]) -> None:
        """Delete keys; unknown keys are ignored."""
        ...


class InMemorySettingsStore:
    """Settings store backed by a dict."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    async def get(self, keys: Iterable[str]) -> Dict[str, Any]:
        return {k: self._values[k] for k in keys if k in self._values}

    async def set(self, values: Dict[str, Any]) -> None:
        self._values.update(values)

    async def remove(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._values.pop(key, None)
