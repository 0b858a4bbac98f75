"""Data models for the recommendation engine."""

from .config import DEFAULT_CONFIG, RecommendationConfig, ScoreWeights, WeightTier, resolve_config
from .events import DislikedThread, ReadEvent, ensure_disliked_threads, ensure_read_events
from .profile import BehaviorPattern
from .scoring import ScoredCandidate
from .settings import ALGORITHMS, SETTINGS_KEYS, PreferenceSettings
from .snapshot import RecommendationSnapshot, RecommendationStats
from .thread import Thread, ensure_threads, thread_map

__all__ = [
    "ALGORITHMS",
    "DEFAULT_CONFIG",
    "BehaviorPattern",
    "DislikedThread",
    "PreferenceSettings",
    "ReadEvent",
    "RecommendationConfig",
    "RecommendationSnapshot",
    "RecommendationStats",
    "SETTINGS_KEYS",
    "ScoreWeights",
    "ScoredCandidate",
    "Thread",
    "WeightTier",
    "ensure_disliked_threads",
    "ensure_read_events",
    "ensure_threads",
    "resolve_config",
    "thread_map",
]
