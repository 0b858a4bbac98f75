"""
Scoring model: ScoredCandidate, a thread with its recommendation score breakdown.
"""

from pydantic import BaseModel

from .config import ScoreWeights
from .thread import Thread


class ScoredCandidate(BaseModel):
    """A thread with all its scoring components."""

    thread: Thread
    content_similarity: float = 0.0
    behavior_similarity: float = 0.0
    freshness_score: float = 0.0
    popularity_score: float = 0.0
    diversity_bonus: float = 0.0
    preferred_tag_bonus: float = 0.0
    dislike_penalty: float = 0.0
    final_score: float = 0.0
    weights: ScoreWeights

    @property
    def thread_id(self) -> str:
        return self.thread.thread_id
