"""
Content-branch ranking: score candidates on several factors and order them.

Public API: CandidateScorer, rank_candidates, finalize_ranking, backfill_recent.
- core: per-request scoring context and the scoring loop.
- Submodules: weights, behavior_match, diversity, adjustments, blended_scoring, fallback.
"""

from .adjustments import dislike_penalty, dislike_penalty_for, preferred_tag_bonus
from .behavior_match import behavior_similarity
from .core import CandidateScorer, is_rankable, rank_candidates
from .diversity import BatchDistribution, diversity_bonus
from .fallback import (
    apply_score_threshold,
    backfill_recent,
    dedupe_by_id,
    finalize_ranking,
    shuffle_tail,
    sort_by_score,
)
from .weights import count_completed_reads, select_weights

__all__ = [
    "BatchDistribution",
    "CandidateScorer",
    "apply_score_threshold",
    "backfill_recent",
    "behavior_similarity",
    "count_completed_reads",
    "dedupe_by_id",
    "dislike_penalty",
    "dislike_penalty_for",
    "diversity_bonus",
    "finalize_ranking",
    "is_rankable",
    "preferred_tag_bonus",
    "rank_candidates",
    "select_weights",
    "shuffle_tail",
    "sort_by_score",
]
