"""Collaborator protocols consumed by the engine, with in-memory implementations."""

from .clicked_store import ClickedStore, InMemoryClickedStore
from .settings_store import InMemorySettingsStore, SettingsStore
from .thread_store import InMemoryThreadStore, ThreadStore

__all__ = [
    "ClickedStore",
    "InMemoryClickedStore",
    "InMemorySettingsStore",
    "InMemoryThreadStore",
    "SettingsStore",
    "ThreadStore",
]
