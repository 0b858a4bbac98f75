"""
Behavior profile: time-decayed preference summary from read events.

Each event is weighted exp(-age_days / profile_decay_days) so recent reads
count more. Categories, tags, and hours of day are ranked by decayed weight;
scroll depth and dwell time are decayed weighted averages. Recent preferences
use plain counts over the last recent_preference_days.
"""

import math
from collections import defaultdict
from datetime import datetime
from typing import Dict, Hashable, List, Optional

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.events import ReadEvent
from ..models.profile import BehaviorPattern
from ..utils.scores import as_utc, days_since, utcnow


def _top_keys(counts: Dict[Hashable, float], n: int) -> List:
    """Keys by descending count; ties keep first-seen order."""
    return [key for key, _ in sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:n]]


def _decay_weight(age_days: Optional[float], decay_days: float) -> float:
    # Undated events count as happening now
    if age_days is None:
        return 1.0
    return math.exp(-age_days / decay_days)


def _recent_preferences(
    events: List[ReadEvent],
    now: datetime,
    config: RecommendationConfig,
) -> Dict[str, List[str]]:
    category_count: Dict[str, float] = defaultdict(float)
    tag_count: Dict[str, float] = defaultdict(float)
    for event in events:
        age = days_since(event.event_time, now)
        if age is None or age > config.recent_preference_days:
            continue
        if event.category:
            category_count[event.category] += 1
        for tag in event.tags:
            tag_count[tag] += 1
    return {
        "categories": _top_keys(category_count, config.recent_top_categories),
        "tags": _top_keys(tag_count, config.recent_top_tags),
    }


def build_behavior_profile(
    read_events: List[ReadEvent],
    now: Optional[datetime] = None,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> BehaviorPattern:
    """
    Aggregate read events into a BehaviorPattern.

    - Empty input: zero profile with default_scroll_depth.
    - Otherwise top categories/tags/hours by decayed weight, decayed average
      scroll depth and dwell time, and recent (unweighted) categories/tags.
    """
    if not read_events:
        return BehaviorPattern(average_scroll_depth=config.default_scroll_depth)

    now = as_utc(now) if now is not None else utcnow()

    # --- 1. Decayed accumulation ---
    category_count: Dict[str, float] = defaultdict(float)
    tag_count: Dict[str, float] = defaultdict(float)
    hour_count: Dict[int, float] = defaultdict(float)
    total_scroll = 0.0
    total_dwell = 0.0
    total_weight = 0.0

    for event in read_events:
        event_time = event.event_time
        weight = _decay_weight(days_since(event_time, now), config.profile_decay_days)

        if event.category:
            category_count[event.category] += weight
        for tag in event.tags:
            tag_count[tag] += weight
        if event_time is not None:
            hour_count[event_time.hour] += weight
        if event.max_scroll_pct:
            total_scroll += event.max_scroll_pct * weight
        if event.dwell_ms_effective:
            total_dwell += event.dwell_ms_effective * weight
        total_weight += weight

    # --- 2. Rank and average ---
    recent = _recent_preferences(read_events, now, config)
    return BehaviorPattern(
        preferred_categories=_top_keys(category_count, config.top_categories),
        preferred_tags=_top_keys(tag_count, config.top_tags),
        active_hours=_top_keys(hour_count, config.top_active_hours),
        average_scroll_depth=(
            total_scroll / total_weight if total_weight > 0 else config.default_scroll_depth
        ),
        average_reading_time=total_dwell / total_weight if total_weight > 0 else 0.0,
        recent_categories=recent["categories"],
        recent_tags=recent["tags"],
    )
