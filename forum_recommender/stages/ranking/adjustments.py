"""
Unweighted score adjustments: preferred-tag bonus and dislike penalty.
"""

from typing import List, Sequence, Tuple

from ...models.thread import Thread
from ...text.tfidf import TfidfSimilarity
from ...utils.tags import matching_preferred_tags

# (similarity must exceed, penalty), checked in order
DISLIKE_PENALTY_TIERS: Sequence[Tuple[float, float]] = ((0.7, 0.8), (0.5, 0.5), (0.3, 0.2))

MAX_PREFERRED_TAG_BONUS = 0.5


def preferred_tag_bonus(thread: Thread, preferred_tags: List[str]) -> float:
    """
    Bonus (0–0.5) for candidates carrying preferred tags.

    0.2 base + 0.3 * matched/candidate tags + min(0.2, 0.2 * matched/preferred tags).
    """
    if not preferred_tags or not thread.tags:
        return 0.0
    matched = matching_preferred_tags(thread.tags, preferred_tags)
    if not matched:
        return 0.0
    bonus = 0.2
    bonus += 0.3 * len(matched) / len(thread.tags)
    bonus += min(0.2, 0.2 * len(matched) / len(preferred_tags))
    return min(bonus, MAX_PREFERRED_TAG_BONUS)


def dislike_penalty_for(max_similarity: float) -> float:
    """Penalty tier for the highest similarity to any disliked thread."""
    for threshold, penalty in DISLIKE_PENALTY_TIERS:
        if max_similarity > threshold:
            return penalty
    return 0.0


def dislike_penalty(candidate_text: str, disliked_texts: List[str], similarity: TfidfSimilarity) -> float:
    """Penalty from the max TF-IDF similarity (no IDF corpus) to any disliked thread text."""
    if not disliked_texts:
        return 0.0
    max_similarity = max(similarity.similarity(candidate_text, text) for text in disliked_texts)
    return dislike_penalty_for(max_similarity)
