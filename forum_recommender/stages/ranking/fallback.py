"""
Final ordering of scored candidates.

Threshold (relaxed when too few pass), stable score sort, optional
force-refresh shuffle of the lower half, truncation, and recency backfill
when the list comes out too short.
"""

import logging
import math
import random
from typing import Callable, List, Optional, Sequence, TypeVar

from ...models.config import DEFAULT_CONFIG, RecommendationConfig
from ...models.scoring import ScoredCandidate
from ...models.thread import Thread
from ..candidate_pool import sort_by_publish_time

logger = logging.getLogger(__name__)

T = TypeVar("T")


def apply_score_threshold(
    scored: List[ScoredCandidate],
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """Keep final_score > score_threshold; relax to > relaxed_score_threshold if too few pass."""
    kept = [c for c in scored if c.final_score > config.score_threshold]
    if len(kept) < config.min_results_before_relax:
        kept = [c for c in scored if c.final_score > config.relaxed_score_threshold]
    return kept


def sort_by_score(scored: List[ScoredCandidate]) -> List[ScoredCandidate]:
    # sorted() is stable: equal scores keep pool order
    return sorted(scored, key=lambda c: c.final_score, reverse=True)


def shuffle_tail(items: Sequence[T], rng: random.Random, keep_fraction: float = 0.5) -> List[T]:
    """Keep the first ceil(n * keep_fraction) items in place and shuffle the rest."""
    keep = math.ceil(round(len(items) * keep_fraction, 9))
    head = list(items[:keep])
    tail = list(items[keep:])
    rng.shuffle(tail)
    return head + tail


def dedupe_by_id(items: List[T], key: Callable[[T], str]) -> List[T]:
    """First occurrence wins."""
    seen = set()
    unique = []
    for item in items:
        item_id = key(item)
        if item_id in seen:
            continue
        seen.add(item_id)
        unique.append(item)
    return unique


def backfill_recent(
    results: List[ScoredCandidate],
    pool: List[Thread],
    is_eligible: Callable[[Thread], bool],
    score: Callable[[Thread], Optional[ScoredCandidate]],
    limit: int,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """
    Append up to backfill_size of the newest eligible pool threads when results
    are shorter than backfill_trigger. Deduped and truncated to limit.
    """
    if len(results) >= config.backfill_trigger:
        return results

    recent = [t for t in sort_by_publish_time(pool) if is_eligible(t)][: config.backfill_size]
    extra = [c for c in (score(t) for t in recent) if c is not None]
    merged = dedupe_by_id(results + extra, key=lambda c: c.thread_id)[:limit]
    logger.info("[ranking] BACKFILL before=%s after=%s", len(results), len(merged))
    return merged


def finalize_ranking(
    scored: List[ScoredCandidate],
    limit: int,
    force_refresh: bool,
    rng: random.Random,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """Threshold, sort, shuffle on refresh, truncate. Backfill is applied separately."""
    ranked = sort_by_score(apply_score_threshold(scored, config))
    if force_refresh and len(ranked) > limit:
        ranked = shuffle_tail(ranked, rng, config.refresh_keep_fraction)
    return ranked[:limit]
