"""
Candidate Pool Pre-Filter

Reduces the full thread catalog to a bounded working set before scoring.
Filters: freshness window, forum, already read, disliked, disliked tags.
When too few threads survive strict disliked-tag matching, the pool is rebuilt
with loose matching and merged with the strict result. Large pools are capped
to the newest max_candidate_pool_size threads.

The public entry point is get_candidate_pool.
"""

import logging
import time
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Set

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.events import DislikedThread, ReadEvent
from ..models.settings import PreferenceSettings
from ..models.thread import Thread
from ..utils.scores import as_utc, utcnow
from ..utils.tags import has_disliked_tag

logger = logging.getLogger(__name__)

ALL_FORUMS = "all"


def _within_freshness_window(thread: Thread, cutoff: datetime) -> bool:
    """True if the thread was published after cutoff. Undated threads stay eligible."""
    published = thread.publish_time
    return published is None or published > cutoff


def _in_forum(thread: Thread, forum: str) -> bool:
    return forum == ALL_FORUMS or thread.forum_id == forum


def _not_excluded(thread: Thread, read_ids: Set[str], disliked_ids: Set[str]) -> bool:
    """True if the thread is neither read nor disliked."""
    return thread.thread_id not in read_ids and thread.thread_id not in disliked_ids


def _filter_eligible_candidates(
    threads: List[Thread],
    read_ids: Set[str],
    disliked_ids: Set[str],
    forum: str,
    cutoff: datetime,
) -> List[Thread]:
    """Threads passing freshness window, forum, and exclusion checks (catalog order)."""
    candidates = []
    for thread in threads:
        if not _within_freshness_window(thread, cutoff):
            continue
        if not _in_forum(thread, forum):
            continue
        if not _not_excluded(thread, read_ids, disliked_ids):
            continue
        candidates.append(thread)
    return candidates


def _filter_disliked_tags(
    threads: List[Thread],
    disliked_tags: List[str],
    strict: bool,
    config: RecommendationConfig,
) -> List[Thread]:
    if not disliked_tags:
        return list(threads)
    return [
        t
        for t in threads
        if not has_disliked_tag(t.tags, disliked_tags, strict=strict, min_length=config.strict_tag_match_min_length)
    ]


def _merge_relaxed(eligible: List[Thread], strict: List[Thread], relaxed: List[Thread]) -> List[Thread]:
    """Union of strict and relaxed pools in catalog order; never smaller than strict."""
    keep = {t.thread_id for t in strict} | {t.thread_id for t in relaxed}
    return [t for t in eligible if t.thread_id in keep]


def _sort_by_recency_and_cap(candidates: List[Thread], config: RecommendationConfig) -> List[Thread]:
    """Newest first, capped at max_candidate_pool_size. Only applied when over the cap."""
    if len(candidates) <= config.max_candidate_pool_size:
        return candidates
    ordered = sorted(candidates, key=_publish_sort_key, reverse=True)
    return ordered[: config.max_candidate_pool_size]


def _publish_sort_key(thread: Thread) -> float:
    published = thread.publish_time
    return published.timestamp() if published is not None else float("-inf")


def sort_by_publish_time(threads: Iterable[Thread]) -> List[Thread]:
    """Newest first; stable for equal timestamps, undated threads last."""
    return sorted(threads, key=_publish_sort_key, reverse=True)


def get_candidate_pool(
    threads: List[Thread],
    read_events: List[ReadEvent],
    disliked_threads: List[DislikedThread],
    forum: str = ALL_FORUMS,
    settings: Optional[PreferenceSettings] = None,
    config: RecommendationConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[Thread]:
    """
    Pre-select the candidate pool.

    Keeps threads published within freshness_window_days, in forum (unless
    "all"), not read, not disliked, and without a strictly-matching disliked
    tag. Fewer than min_candidate_pool_size survivors → merge in the loosely
    matched pool. More than max_candidate_pool_size → newest ones only.
    """
    start = time.perf_counter()
    now = as_utc(now) if now is not None else utcnow()
    settings = settings or PreferenceSettings()
    cutoff = now - timedelta(days=config.freshness_window_days)

    read_ids = {e.thread_id for e in read_events}
    disliked_ids = {d.thread_id for d in disliked_threads}

    # Filter: window, forum, read/disliked exclusions
    eligible = _filter_eligible_candidates(threads, read_ids, disliked_ids, forum, cutoff)

    # Disliked tags: strict first
    candidates = _filter_disliked_tags(eligible, settings.disliked_tags, True, config)

    # Sparse data: widen with loose matching
    if len(candidates) < config.min_candidate_pool_size:
        relaxed = _filter_disliked_tags(eligible, settings.disliked_tags, False, config)
        merged = _merge_relaxed(eligible, candidates, relaxed)
        logger.info(
            "[prefilter] RELAXED_TAG_MATCH strict=%s relaxed=%s merged=%s",
            len(candidates), len(relaxed), len(merged),
        )
        candidates = merged

    # Cap at max_candidate_pool_size
    candidates = _sort_by_recency_and_cap(candidates, config)

    logger.info(
        "[prefilter] POOL_READY total=%s kept=%s elapsed_ms=%.2f",
        len(threads), len(candidates), (time.perf_counter() - start) * 1000,
    )
    return candidates
