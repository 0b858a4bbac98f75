"""
Reader preference settings as read from the settings collaborator.
"""

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .thread import coerce_tags

logger = logging.getLogger(__name__)

ALGORITHMS = ("content", "behavior", "mixed", "popular")

# Keys requested from the settings store.
SETTINGS_KEYS = ["dislikedTags", "preferredTags", "recommendationCount", "recommendationAlgorithm"]


class PreferenceSettings(BaseModel):
    """Disliked/preferred tags, result count override, and algorithm choice."""

    model_config = ConfigDict(populate_by_name=True)

    disliked_tags: List[str] = Field(default_factory=list, alias="dislikedTags")
    preferred_tags: List[str] = Field(default_factory=list, alias="preferredTags")
    recommendation_count: Optional[int] = Field(default=None, alias="recommendationCount")
    algorithm: Literal["content", "behavior", "mixed", "popular"] = Field(
        default="mixed", alias="recommendationAlgorithm"
    )

    @field_validator("disliked_tags", "preferred_tags", mode="before")
    @classmethod
    def _tags(cls, v):
        return coerce_tags(v)

    @field_validator("recommendation_count", mode="before")
    @classmethod
    def _count(cls, v):
        # 0 / empty mean "not set"
        if not v:
            return None
        return v

    @field_validator("algorithm", mode="before")
    @classmethod
    def _algorithm(cls, v):
        if not v:
            return "mixed"
        if v not in ALGORITHMS:
            logger.warning("[settings] UNKNOWN_ALGORITHM value=%s falling back to mixed", v)
            return "mixed"
        return v

    @classmethod
    def from_store(cls, values: Optional[Dict[str, Any]]) -> "PreferenceSettings":
        """Build from a settings-store response; missing keys take defaults."""
        values = values or {}
        return cls.model_validate({k: values[k] for k in SETTINGS_KEYS if values.get(k) is not None})
