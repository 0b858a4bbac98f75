"""
Main ranking orchestration: build the per-request scoring context, then score
every eligible candidate.

Submodules used: weights, behavior_match, diversity, adjustments, blended_scoring.
"""

import logging
import time
from datetime import datetime
from typing import Dict, List, Optional, Set

from ...models.config import DEFAULT_CONFIG, RecommendationConfig
from ...models.events import DislikedThread, ReadEvent
from ...models.scoring import ScoredCandidate
from ...models.settings import PreferenceSettings
from ...models.thread import Thread
from ...text.tfidf import DocumentCorpus, TfidfSimilarity
from ...text.thread_text import get_corpus_text, get_disliked_text, get_history_text, get_thread_text
from ...utils.scores import as_utc, days_since, freshness_score, hours_since, popularity_score, utcnow
from ...utils.tags import has_disliked_tag
from ..behavior_profile import build_behavior_profile
from .adjustments import dislike_penalty, preferred_tag_bonus
from .behavior_match import behavior_similarity
from .blended_scoring import build_scored_candidate
from .diversity import BatchDistribution, diversity_bonus
from .weights import select_weights

logger = logging.getLogger(__name__)


class CandidateScorer:
    """
    Scores threads for one request.

    Everything that depends only on the reader (history text, behavior
    pattern, weights, disliked texts) or on the batch (IDF corpus, diversity
    counts) is computed once here; score() then handles a single thread.
    """

    def __init__(
        self,
        pool: List[Thread],
        batch: List[Thread],
        read_events: List[ReadEvent],
        disliked_threads: List[DislikedThread],
        thread_by_id: Dict[str, Thread],
        settings: PreferenceSettings,
        similarity: TfidfSimilarity,
        config: RecommendationConfig = DEFAULT_CONFIG,
        now: Optional[datetime] = None,
    ):
        self.now = as_utc(now) if now is not None else utcnow()
        self.similarity = similarity
        self.settings = settings
        self.has_history = bool(read_events)

        completed = [e for e in read_events if e.is_completed]
        self.history_text = get_history_text(completed, thread_by_id, config.history_content_chars)
        self.corpus = DocumentCorpus([get_corpus_text(t, config.history_content_chars) for t in pool])
        self.pattern = build_behavior_profile(read_events, self.now, config)
        self.weights = select_weights(read_events, config)
        self.distribution = BatchDistribution.from_threads(batch)
        self.disliked_texts = [
            text for text in (get_disliked_text(d, thread_by_id) for d in disliked_threads) if text.strip()
        ]

    def score(self, thread: Thread) -> ScoredCandidate:
        text = get_thread_text(thread)
        published = thread.publish_time
        return build_scored_candidate(
            thread,
            self.weights,
            content_similarity=self.similarity.similarity(self.history_text, text, self.corpus),
            behavior_similarity=behavior_similarity(thread, self.pattern) if self.has_history else 0.0,
            freshness_score=freshness_score(days_since(published, self.now)),
            popularity_score=popularity_score(
                thread.reply_count, thread.like_count, thread.view_count, hours_since(published, self.now)
            ),
            diversity_bonus=diversity_bonus(thread, self.distribution),
            preferred_tag_bonus=preferred_tag_bonus(thread, self.settings.preferred_tags),
            dislike_penalty=dislike_penalty(text, self.disliked_texts, self.similarity),
        )

    def try_score(self, thread: Thread) -> Optional[ScoredCandidate]:
        """score(), or None (logged) when the record cannot be scored."""
        try:
            return self.score(thread)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning("[ranking] CANDIDATE_SKIPPED thread_id=%s error=%s", thread.thread_id, exc)
            return None


def is_rankable(
    thread: Thread,
    read_ids: Set[str],
    disliked_ids: Set[str],
    clicked_ids: Set[str],
    disliked_tags: List[str],
    force_refresh: bool,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> bool:
    """Not read, never disliked (even on refresh), not clicked unless refreshing, no strict disliked tag."""
    if thread.thread_id in read_ids or thread.thread_id in disliked_ids:
        return False
    if thread.thread_id in clicked_ids and not force_refresh:
        return False
    if has_disliked_tag(thread.tags, disliked_tags, strict=True, min_length=config.strict_tag_match_min_length):
        return False
    return True


def rank_candidates(
    batch: List[Thread],
    scorer: CandidateScorer,
    read_ids: Set[str],
    disliked_ids: Set[str],
    clicked_ids: Set[str],
    disliked_tags: List[str],
    force_refresh: bool = False,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """
    Score every rankable thread of batch (batch order, unsorted).

    Ineligible threads are dropped before scoring; threads whose scoring
    raises a data error are skipped.
    """
    start = time.perf_counter()
    scored: List[ScoredCandidate] = []
    for thread in batch:
        if not is_rankable(thread, read_ids, disliked_ids, clicked_ids, disliked_tags, force_refresh, config):
            continue
        result = scorer.try_score(thread)
        if result is not None:
            scored.append(result)

    logger.info(
        "[ranking] SCORED processed=%s scored=%s elapsed_ms=%.2f",
        len(batch), len(scored), (time.perf_counter() - start) * 1000,
    )
    return scored
