"""
Reader signal models: read events and disliked threads.

Used by the behavior profile, the reading-history text, and exclusion sets.
Built from collaborator dicts via model_validate(d) or the ensure_* helpers.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..utils.scores import as_utc
from .base import ensure_models
from .thread import coerce_tags


class ReadEvent(BaseModel):
    """
    One finalized reading session on a thread.

    completed: 1 when the reader finished the thread, else 0.
    category/tags: snapshot of the thread at read time.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    thread_id: str
    session_id: Optional[str] = None
    completed: int = 0
    dwell_ms_effective: float = 0.0
    max_scroll_pct: float = 0.0
    created_at: Optional[datetime] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v):
        return coerce_tags(v)

    @field_validator("completed", mode="before")
    @classmethod
    def _completed(cls, v):
        if v is None:
            return 0
        return 1 if v is True or v == 1 else 0

    @field_validator("dwell_ms_effective", mode="before")
    @classmethod
    def _non_negative(cls, v):
        return 0.0 if v is None else max(0.0, float(v))

    @field_validator("max_scroll_pct", mode="before")
    @classmethod
    def _percent(cls, v):
        return 0.0 if v is None else min(100.0, max(0.0, float(v)))

    @property
    def is_completed(self) -> bool:
        return self.completed == 1

    @property
    def event_time(self) -> Optional[datetime]:
        return as_utc(self.created_at)


class DislikedThread(BaseModel):
    """
    A thread the reader marked as not interesting.

    title/category/tags are an optional snapshot used for the dislike penalty;
    when absent, the thread is resolved from the catalog.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    thread_id: str
    created_at: Optional[datetime] = None
    title: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v):
        return coerce_tags(v)


def ensure_read_events(items: List[Union[Dict[str, Any], "ReadEvent"]]) -> List["ReadEvent"]:
    """Convert dicts to ReadEvent models; malformed records are skipped."""
    return ensure_models(ReadEvent, items, "READ_EVENT")


def ensure_disliked_threads(
    items: List[Union[Dict[str, Any], "DislikedThread"]],
) -> List["DislikedThread"]:
    """Convert dicts to DislikedThread models; malformed records are skipped."""
    return ensure_models(DislikedThread, items, "DISLIKED_THREAD")
