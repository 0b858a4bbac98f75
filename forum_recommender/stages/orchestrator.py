"""
Pipeline orchestrator: runs the candidate pool then ranking for the content
branch, and the tag branch, over one RecommendationSnapshot.

These functions are pure apart from the similarity cache they are handed;
fetching the snapshot and owning state is the engine's job.
"""

import random
from datetime import datetime
from typing import List, Optional

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.scoring import ScoredCandidate
from ..models.snapshot import RecommendationSnapshot
from ..models.thread import Thread, thread_map
from ..text.tfidf import TfidfSimilarity
from .candidate_pool import ALL_FORUMS, get_candidate_pool
from .ranking import CandidateScorer, backfill_recent, finalize_ranking, is_rankable, rank_candidates
from .tag_branch import recommend_by_tags


def run_content_branch(
    snapshot: RecommendationSnapshot,
    similarity: TfidfSimilarity,
    limit: int = 10,
    forum: str = ALL_FORUMS,
    force_refresh: bool = False,
    rng: Optional[random.Random] = None,
    config: RecommendationConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[ScoredCandidate]:
    """
    Content branch (pool → scoring → threshold/shuffle → backfill).

    Returns:
        At most limit ScoredCandidates, best first.
    """
    rng = rng or random.Random()
    settings = snapshot.settings
    thread_by_id = thread_map(snapshot.threads)

    # Stage A: candidate pool
    pool = get_candidate_pool(
        snapshot.threads,
        snapshot.read_events,
        snapshot.disliked_threads,
        forum=forum,
        settings=settings,
        config=config,
        now=now,
    )
    if not pool:
        return []

    # Stage B: score the first max_scored_candidates pool threads
    batch = pool[: config.max_scored_candidates]
    scorer = CandidateScorer(
        pool,
        batch,
        snapshot.read_events,
        snapshot.disliked_threads,
        thread_by_id,
        settings,
        similarity,
        config,
        now,
    )
    read_ids = snapshot.read_ids
    disliked_ids = snapshot.disliked_ids
    clicked_ids = snapshot.clicked_ids
    scored = rank_candidates(
        batch,
        scorer,
        read_ids,
        disliked_ids,
        clicked_ids,
        settings.disliked_tags,
        force_refresh=force_refresh,
        config=config,
    )

    # Stage C: order, then top up from the newest pool threads
    ranked = finalize_ranking(scored, limit, force_refresh, rng, config)
    return backfill_recent(
        ranked,
        pool,
        is_eligible=lambda t: is_rankable(
            t, read_ids, disliked_ids, clicked_ids, settings.disliked_tags, force_refresh, config
        ),
        score=scorer.try_score,
        limit=limit,
        config=config,
    )


def run_tag_branch(
    snapshot: RecommendationSnapshot,
    limit: int = 10,
    forum: str = ALL_FORUMS,
    force_refresh: bool = False,
    rng: Optional[random.Random] = None,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[Thread]:
    """Tag branch over the snapshot's full thread set."""
    return recommend_by_tags(
        snapshot.threads,
        snapshot.read_events,
        snapshot.disliked_ids,
        snapshot.clicked_ids,
        thread_map(snapshot.threads),
        settings=snapshot.settings,
        limit=limit,
        forum=forum,
        force_refresh=force_refresh,
        rng=rng,
        config=config,
    )
