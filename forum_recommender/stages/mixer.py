"""
Branch mixer: split the limit between branches and merge their results.
"""

import math
from typing import List, Tuple

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.thread import Thread
from .ranking.fallback import dedupe_by_id


def _share(limit: int, fraction: float) -> int:
    # round() first: 10 * 0.7 is 7.000000000000001 in floating point
    return math.ceil(round(limit * fraction, 9))


def branch_limits(limit: int, config: RecommendationConfig = DEFAULT_CONFIG) -> Tuple[int, int]:
    """(content limit, tag limit) as ceil(limit * share) each."""
    return _share(limit, config.content_branch_share), _share(limit, config.tag_branch_share)


def merge_branches(content: List[Thread], tags: List[Thread], limit: int) -> List[Thread]:
    """Content results first, then tag results; deduped by thread_id and truncated."""
    return dedupe_by_id(content + tags, key=lambda t: t.thread_id)[:limit]
