"""
Diversity bonus against the current candidate batch.

Rewards candidates whose category, tags, and publish hour are rare within the
batch being scored. Batch counts are computed once per request.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from ...models.thread import Thread

NEUTRAL = 0.5


def _publish_hour(thread: Thread) -> Optional[int]:
    published = thread.publish_time
    return published.hour if published is not None else None


@dataclass
class BatchDistribution:
    """Category, tag, and publish-hour counts over a batch of threads."""

    total: int = 0
    categories: Counter = field(default_factory=Counter)
    tags: Counter = field(default_factory=Counter)
    hours: Counter = field(default_factory=Counter)

    @classmethod
    def from_threads(cls, threads: List[Thread]) -> "BatchDistribution":
        dist = cls(total=len(threads))
        for t in threads:
            if t.category:
                dist.categories[t.category] += 1
            dist.tags.update(t.tags)
            dist.hours[_publish_hour(t)] += 1
        return dist


def category_diversity(thread: Thread, dist: BatchDistribution) -> float:
    if not thread.category or dist.total == 0:
        return NEUTRAL
    return 1 - dist.categories[thread.category] / dist.total


def tag_diversity(thread: Thread, dist: BatchDistribution) -> float:
    if not thread.tags:
        return NEUTRAL
    return sum(1 / (1 + dist.tags[tag]) for tag in thread.tags) / len(thread.tags)


def time_diversity(thread: Thread, dist: BatchDistribution) -> float:
    if dist.total == 0:
        return NEUTRAL
    return 1 - dist.hours[_publish_hour(thread)] / dist.total


def diversity_bonus(thread: Thread, dist: BatchDistribution) -> float:
    """Mean of category, tag, and publish-hour rarity (each 0–1)."""
    return (category_diversity(thread, dist) + tag_diversity(thread, dist) + time_diversity(thread, dist)) / 3
