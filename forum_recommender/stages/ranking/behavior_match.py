"""
Behavior similarity: how well a candidate matches the reader's BehaviorPattern.
"""

from ...models.profile import BehaviorPattern
from ...models.thread import Thread

CATEGORY_WEIGHT = 0.35
TAG_WEIGHT = 0.30
RECENT_CATEGORY_WEIGHT = 0.20
ACTIVE_HOUR_WEIGHT = 0.10
SCROLL_DEPTH_WEIGHT = 0.05


def estimated_scroll_depth(content_length: int) -> float:
    """Expected scroll depth (0–100) for a thread body of content_length characters."""
    return min(100.0, content_length / 1000 * 20)


def behavior_similarity(thread: Thread, pattern: BehaviorPattern) -> float:
    """
    Weighted match (0–1) of candidate against the behavior pattern.

    0.35 preferred category, 0.30 * share of tags among preferred tags,
    0.20 recent category, 0.10 publish hour among active hours,
    0.05 * scroll-depth closeness when content_length is known.
    """
    score = 0.0

    if thread.category and thread.category in pattern.preferred_categories:
        score += CATEGORY_WEIGHT

    if thread.tags:
        preferred = set(pattern.preferred_tags)
        matched = sum(1 for tag in thread.tags if tag in preferred)
        score += TAG_WEIGHT * (matched / len(thread.tags))

    if thread.category and thread.category in pattern.recent_categories:
        score += RECENT_CATEGORY_WEIGHT

    published = thread.publish_time
    if published is not None and published.hour in pattern.active_hours:
        score += ACTIVE_HOUR_WEIGHT

    if thread.content_length:
        depth_match = 1 - abs(pattern.average_scroll_depth - estimated_scroll_depth(thread.content_length)) / 100
        score += SCROLL_DEPTH_WEIGHT * max(0.0, depth_match)

    return min(1.0, score)
