"""
Forum thread recommender.

Content-based, behavior-aware recommendations for a forum reader:
TF-IDF similarity against reading history, a time-decayed behavior profile,
freshness and popularity signals, and a tag-overlap branch, mixed into one
list by RecommendationEngine.
"""

from .engine import RecommendationEngine
from .models.config import DEFAULT_CONFIG, RecommendationConfig, ScoreWeights, WeightTier
from .models.events import DislikedThread, ReadEvent
from .models.scoring import ScoredCandidate
from .models.settings import PreferenceSettings
from .models.snapshot import RecommendationSnapshot, RecommendationStats
from .models.thread import Thread
from .services import (
    ClickedStore,
    InMemoryClickedStore,
    InMemorySettingsStore,
    InMemoryThreadStore,
    SettingsStore,
    ThreadStore,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ClickedStore",
    "DislikedThread",
    "InMemoryClickedStore",
    "InMemorySettingsStore",
    "InMemoryThreadStore",
    "PreferenceSettings",
    "ReadEvent",
    "RecommendationConfig",
    "RecommendationEngine",
    "RecommendationSnapshot",
    "RecommendationStats",
    "ScoreWeights",
    "ScoredCandidate",
    "SettingsStore",
    "Thread",
    "ThreadStore",
    "WeightTier",
]
