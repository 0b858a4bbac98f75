"""
Snapshot model: the collaborator data one top-level request works on.

Fetched once per request and shared read-only by the content and tag branches.
"""

from typing import List, Set

from pydantic import BaseModel, Field

from .events import DislikedThread, ReadEvent
from .settings import PreferenceSettings
from .thread import Thread


class RecommendationSnapshot(BaseModel):
    """Threads, reader signals, settings, and clicked ids for one request."""

    threads: List[Thread] = Field(default_factory=list)
    read_events: List[ReadEvent] = Field(default_factory=list)
    disliked_threads: List[DislikedThread] = Field(default_factory=list)
    settings: PreferenceSettings = Field(default_factory=PreferenceSettings)
    clicked_ids: Set[str] = Field(default_factory=set)

    @property
    def read_ids(self) -> Set[str]:
        return {event.thread_id for event in self.read_events}

    @property
    def disliked_ids(self) -> Set[str]:
        return {disliked.thread_id for disliked in self.disliked_threads}


class RecommendationStats(BaseModel):
    """Catalog counts shown next to the recommendation list."""

    total_threads: int = 0
    read_threads: int = 0
    disliked_threads: int = 0
    available_for_recommendation: int = 0
