"""
Behavior profile model: the reader's aggregated preferences.
"""

from typing import List

from pydantic import BaseModel, Field


class BehaviorPattern(BaseModel):
    """
    Time-decayed preference summary built from read events.

    preferred_*/active_hours: ranked by decayed weight (strongest first).
    recent_*: ranked by raw count over the recent window only.
    """

    preferred_categories: List[str] = Field(default_factory=list)
    preferred_tags: List[str] = Field(default_factory=list)
    active_hours: List[int] = Field(default_factory=list)
    average_scroll_depth: float = 50.0
    average_reading_time: float = 0.0
    recent_categories: List[str] = Field(default_factory=list)
    recent_tags: List[str] = Field(default_factory=list)
