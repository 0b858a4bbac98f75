"""Shared utilities for scoring, similarity, and tag matching."""

from .scores import as_utc, days_since, freshness_score, hours_since, popularity_score, utcnow
from .similarity import cosine_similarity, sparse_cosine_similarity
from .tags import has_disliked_tag, matches_tag_loose, matches_tag_strict, matching_preferred_tags

__all__ = [
    "as_utc",
    "days_since",
    "freshness_score",
    "hours_since",
    "popularity_score",
    "utcnow",
    "cosine_similarity",
    "sparse_cosine_similarity",
    "has_disliked_tag",
    "matches_tag_loose",
    "matches_tag_strict",
    "matching_preferred_tags",
]
