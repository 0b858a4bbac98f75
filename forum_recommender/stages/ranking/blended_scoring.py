"""
Per-candidate blended scoring.

Builds a ScoredCandidate from the individual factors and the reader's weights:

    final = w.content * content + w.behavior * behavior + w.freshness * freshness
          + w.popularity * popularity + w.diversity * diversity
          + preferred_tag_bonus - dislike_penalty

The final score is not clamped; the ranker interprets it.
"""

from ...models.config import ScoreWeights
from ...models.scoring import ScoredCandidate
from ...models.thread import Thread


def build_scored_candidate(
    thread: Thread,
    weights: ScoreWeights,
    content_similarity: float,
    behavior_similarity: float,
    freshness_score: float,
    popularity_score: float,
    diversity_bonus: float,
    preferred_tag_bonus: float = 0.0,
    dislike_penalty: float = 0.0,
) -> ScoredCandidate:
    final = (
        weights.content * content_similarity
        + weights.behavior * behavior_similarity
        + weights.freshness * freshness_score
        + weights.popularity * popularity_score
        + weights.diversity * diversity_bonus
        + preferred_tag_bonus
        - dislike_penalty
    )
    return ScoredCandidate(
        thread=thread,
        content_similarity=content_similarity,
        behavior_similarity=behavior_similarity,
        freshness_score=freshness_score,
        popularity_score=popularity_score,
        diversity_bonus=diversity_bonus,
        preferred_tag_bonus=preferred_tag_bonus,
        dislike_penalty=dislike_penalty,
        final_score=final,
        weights=weights,
    )
