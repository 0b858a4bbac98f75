"""
Thread model: typed representation of a forum thread for the recommendation pipeline.

Used by candidate_pool, ranking, and the tag branch instead of raw dicts.
Built from collaborator dicts (camelCase keys such as threadId, publishedAt)
via Thread.model_validate(d) or ensure_threads().
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..utils.scores import as_utc
from .base import ensure_models


def coerce_tags(value: Any) -> List[str]:
    """Tags as a list of strings; None → [], a bare string → [string]."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(tag) for tag in value if tag is not None]


class Thread(BaseModel):
    """
    Thread payload used across the engine stages.

    All fields except thread_id are optional to support partial records:
    missing tags → [], missing counts → 0, missing category → None.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    thread_id: str
    forum_id: str = ""
    url: str = ""
    title: str = ""
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    author_id: Optional[str] = None
    author_name: Optional[str] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    reply_count: int = 0
    like_count: int = 0
    view_count: int = 0
    content_length: Optional[int] = None
    content: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v):
        return coerce_tags(v)

    @field_validator("reply_count", "like_count", "view_count", mode="before")
    @classmethod
    def _counts(cls, v):
        return 0 if v is None else v

    @field_validator("title", "forum_id", "url", mode="before")
    @classmethod
    def _strings(cls, v):
        return "" if v is None else v

    @property
    def publish_time(self) -> Optional[datetime]:
        """published_at, else created_at; always timezone-aware (UTC when naive)."""
        return as_utc(self.published_at or self.created_at)


def ensure_threads(items: List[Union[Dict[str, Any], "Thread"]]) -> List["Thread"]:
    """Convert dicts to Thread models; records that fail validation are skipped."""
    return ensure_models(Thread, items, "THREAD")


def thread_map(threads: List["Thread"]) -> Dict[str, "Thread"]:
    """thread_id -> Thread; first occurrence wins."""
    by_id: Dict[str, Thread] = {}
    for thread in threads:
        by_id.setdefault(thread.thread_id, thread)
    return by_id
