"""
Tag branch: threads sharing the reader's most-read tags, newest first.

Complements the content branch with plain tag overlap. Tags are taken from
the catalog thread behind each completed read, not from the event itself.
"""

import logging
import random
from collections import Counter
from typing import Dict, List, Optional, Set

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.events import ReadEvent
from ..models.settings import PreferenceSettings
from ..models.thread import Thread
from ..utils.tags import has_disliked_tag
from .candidate_pool import ALL_FORUMS, sort_by_publish_time
from .ranking.fallback import shuffle_tail

logger = logging.getLogger(__name__)


def top_read_tags(
    completed_events: List[ReadEvent],
    thread_by_id: Dict[str, Thread],
    n: int = 5,
) -> List[str]:
    """Most frequent tags across completed reads; ties keep first-seen order."""
    counts: Counter = Counter()
    for event in completed_events:
        thread = thread_by_id.get(event.thread_id)
        if thread is None:
            continue
        counts.update(tag for tag in thread.tags if tag)
    return [tag for tag, _ in counts.most_common(n)]


def recommend_by_tags(
    threads: List[Thread],
    read_events: List[ReadEvent],
    disliked_ids: Set[str],
    clicked_ids: Set[str],
    thread_by_id: Dict[str, Thread],
    settings: Optional[PreferenceSettings] = None,
    limit: int = 10,
    forum: str = ALL_FORUMS,
    force_refresh: bool = False,
    rng: Optional[random.Random] = None,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[Thread]:
    """
    Threads carrying any of the reader's top tags.

    Excludes read, disliked, clicked (unless force_refresh) and loosely
    matched disliked-tag threads. Empty when the reader has no reads or the
    reads carry no tags.
    """
    if not read_events:
        return []

    completed = [e for e in read_events if e.is_completed]
    top_tags = set(top_read_tags(completed, thread_by_id, config.tag_branch_top_tags))
    if not top_tags:
        return []

    settings = settings or PreferenceSettings()
    read_ids = {e.thread_id for e in read_events}

    matches = []
    for thread in threads:
        if forum != ALL_FORUMS and thread.forum_id != forum:
            continue
        if thread.thread_id in read_ids or thread.thread_id in disliked_ids:
            continue
        if thread.thread_id in clicked_ids and not force_refresh:
            continue
        if not top_tags.intersection(thread.tags):
            continue
        if has_disliked_tag(thread.tags, settings.disliked_tags, strict=False):
            continue
        matches.append(thread)

    ordered = sort_by_publish_time(matches)
    if force_refresh and len(ordered) > limit:
        ordered = shuffle_tail(ordered, rng or random.Random(), config.refresh_keep_fraction)

    logger.info("[tags] BRANCH_READY top_tags=%s matches=%s", len(top_tags), len(ordered))
    return ordered[:limit]
