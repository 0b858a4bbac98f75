"""
Recommendation engine: async facade over the pipeline stages.

Owns the per-instance state (similarity cache, injected rng and clock) and
the collaborators. Every top-level call fetches one RecommendationSnapshot
and hands it to the pure stage functions in stages/.
"""

import asyncio
import logging
import random
from datetime import datetime
from typing import Callable, List, Optional

from .config import EngineSettings, get_settings, load_recommendation_config
from .models.config import RecommendationConfig, resolve_config
from .models.events import ensure_disliked_threads, ensure_read_events
from .models.scoring import ScoredCandidate
from .models.settings import SETTINGS_KEYS, PreferenceSettings
from .models.snapshot import RecommendationSnapshot, RecommendationStats
from .models.thread import Thread, ensure_threads
from .services.clicked_store import ClickedStore
from .services.settings_store import SettingsStore
from .services.thread_store import ThreadStore
from .stages.candidate_pool import ALL_FORUMS
from .stages.mixer import branch_limits, merge_branches
from .stages.orchestrator import run_content_branch, run_tag_branch
from .text.cache import SimilarityCache
from .text.tfidf import TfidfSimilarity
from .utils.scores import hours_since, popularity_score, utcnow

logger = logging.getLogger(__name__)

# Settings cleared by reset_recommendation_state; preferred tags are kept.
RESETTABLE_SETTINGS = ["dislikedTags", "recommendationCount", "recommendationAlgorithm"]


class RecommendationEngine:
    """
    Recommends forum threads for one reader.

    Collaborators are async and injected; rng drives the force-refresh
    shuffle and clock supplies "now" for freshness and decay.
    """

    def __init__(
        self,
        thread_store: ThreadStore,
        settings_store: SettingsStore,
        clicked_store: ClickedStore,
        config: Optional[RecommendationConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        default_limit: int = 10,
    ):
        self.thread_store = thread_store
        self.settings_store = settings_store
        self.clicked_store = clicked_store
        self.config = resolve_config(config)
        self.rng = rng or random.Random()
        self.clock = clock or utcnow
        self.default_limit = default_limit
        self.similarity = TfidfSimilarity(
            SimilarityCache(self.config.similarity_cache_size, self.config.cache_key_chars)
        )

    @classmethod
    def from_settings(
        cls,
        thread_store: ThreadStore,
        settings_store: SettingsStore,
        clicked_store: ClickedStore,
        settings: Optional[EngineSettings] = None,
    ) -> "RecommendationEngine":
        """Engine configured from EngineSettings (config file, seed, default limit)."""
        settings = settings or get_settings()
        rng = random.Random(settings.random_seed) if settings.random_seed is not None else None
        return cls(
            thread_store,
            settings_store,
            clicked_store,
            config=load_recommendation_config(settings),
            rng=rng,
            default_limit=settings.default_limit,
        )

    # --- Snapshot ---

    async def _load_settings(self) -> PreferenceSettings:
        return PreferenceSettings.from_store(await self.settings_store.get(SETTINGS_KEYS))

    async def _load_snapshot(self) -> RecommendationSnapshot:
        threads, read_events, disliked, settings, clicked = await asyncio.gather(
            self.thread_store.get_all_threads(),
            self.thread_store.get_all_read_events(),
            self.thread_store.get_all_disliked_threads(),
            self._load_settings(),
            self.clicked_store.get(),
        )
        return RecommendationSnapshot(
            threads=ensure_threads(threads),
            read_events=ensure_read_events(read_events),
            disliked_threads=ensure_disliked_threads(disliked),
            settings=settings,
            clicked_ids=set(clicked or ()),
        )

    # --- Branches ---

    def _content(self, snapshot, limit, forum, force_refresh) -> List[ScoredCandidate]:
        return run_content_branch(
            snapshot,
            self.similarity,
            limit=limit,
            forum=forum,
            force_refresh=force_refresh,
            rng=self.rng,
            config=self.config,
            now=self.clock(),
        )

    def _tags(self, snapshot, limit, forum, force_refresh) -> List[Thread]:
        return run_tag_branch(
            snapshot,
            limit=limit,
            forum=forum,
            force_refresh=force_refresh,
            rng=self.rng,
            config=self.config,
        )

    async def _mixed(self, snapshot, limit, forum, force_refresh) -> List[Thread]:
        content_limit, tag_limit = branch_limits(limit, self.config)

        async def content_branch() -> List[Thread]:
            return [c.thread for c in self._content(snapshot, content_limit, forum, force_refresh)]

        async def tag_branch() -> List[Thread]:
            return self._tags(snapshot, tag_limit, forum, force_refresh)

        content, tags = await asyncio.gather(content_branch(), tag_branch())
        merged = merge_branches(content, tags, limit)
        logger.info(
            "[recommender] MIXED content=%s tags=%s merged=%s", len(content), len(tags), len(merged)
        )
        return merged

    def _by_popularity(self, threads: List[Thread]) -> List[Thread]:
        now = self.clock()
        return sorted(
            threads,
            key=lambda t: popularity_score(
                t.reply_count, t.like_count, t.view_count, hours_since(t.publish_time, now)
            ),
            reverse=True,
        )

    # --- Public API ---

    async def recommend_by_content(
        self,
        limit: Optional[int] = None,
        forum: str = ALL_FORUMS,
        force_refresh: bool = False,
    ) -> List[ScoredCandidate]:
        """Content-similarity recommendations with their score breakdown."""
        if limit is None:
            limit = self.default_limit
        try:
            snapshot = await self._load_snapshot()
            return self._content(snapshot, limit, forum, force_refresh)
        except Exception:
            logger.exception("[recommender] CONTENT_FAILED limit=%s forum=%s", limit, forum)
            return []

    async def recommend_by_tags(
        self,
        limit: Optional[int] = None,
        forum: str = ALL_FORUMS,
        force_refresh: bool = False,
    ) -> List[Thread]:
        """Threads sharing the reader's most-read tags, newest first."""
        if limit is None:
            limit = self.default_limit
        try:
            snapshot = await self._load_snapshot()
            return self._tags(snapshot, limit, forum, force_refresh)
        except Exception:
            logger.exception("[recommender] TAGS_FAILED limit=%s forum=%s", limit, forum)
            return []

    async def recommend_mixed(
        self,
        limit: Optional[int] = None,
        forum: str = ALL_FORUMS,
        force_refresh: bool = False,
    ) -> List[Thread]:
        """
        Content and tag branches over one snapshot, merged content-first.

        A force refresh clears the clicked set before loading the snapshot.
        """
        if limit is None:
            limit = self.default_limit
        try:
            if force_refresh:
                await self.clicked_store.clear()
            snapshot = await self._load_snapshot()
            return await self._mixed(snapshot, limit, forum, force_refresh)
        except Exception:
            logger.exception("[recommender] MIXED_FAILED limit=%s forum=%s", limit, forum)
            return []

    async def recommend(
        self,
        limit: Optional[int] = None,
        forum: str = ALL_FORUMS,
        force_refresh: bool = False,
    ) -> List[Thread]:
        """
        Recommendations using the reader's chosen algorithm.

        recommendationCount, when set, overrides limit. "content" and
        "behavior" run a single branch, "popular" re-sorts a doubled mixed
        list by popularity, anything else runs the mixer.
        """
        try:
            settings = await self._load_settings()
            if settings.recommendation_count:
                limit = settings.recommendation_count
            elif limit is None:
                limit = self.default_limit
            algorithm = settings.algorithm
            logger.info("[recommender] DISPATCH algorithm=%s limit=%s", algorithm, limit)

            if algorithm == "content":
                return [c.thread for c in await self.recommend_by_content(limit, forum, force_refresh)]
            if algorithm == "behavior":
                return await self.recommend_by_tags(limit, forum, force_refresh)
            if algorithm == "popular":
                threads = await self.recommend_mixed(limit * 2, forum, force_refresh)
                return self._by_popularity(threads)[:limit]
            return await self.recommend_mixed(limit, forum, force_refresh)
        except Exception:
            logger.exception("[recommender] RECOMMEND_FAILED limit=%s forum=%s", limit, forum)
            return []

    async def mark_clicked(self, thread_id: str) -> None:
        await self.clicked_store.add(thread_id)

    async def clear_clicked(self) -> None:
        await self.clicked_store.clear()

    def clear_similarity_cache(self) -> None:
        self.similarity.clear_cache()

    def get_cache_stats(self):
        return self.similarity.cache_stats()

    async def reset_recommendation_state(self) -> None:
        """Clear the similarity cache, clicked set, disliked tags, and count/algorithm settings."""
        self.clear_similarity_cache()
        await self.clicked_store.clear()
        await self.settings_store.remove(RESETTABLE_SETTINGS)
        logger.info("[recommender] STATE_RESET")

    async def get_recommendation_stats(self) -> RecommendationStats:
        """Catalog counts; all zeros (logged) when a collaborator fails."""
        try:
            threads, read_events, disliked = await asyncio.gather(
                self.thread_store.get_all_threads(),
                self.thread_store.get_all_read_events(),
                self.thread_store.get_all_disliked_threads(),
            )
        except Exception:
            logger.exception("[recommender] STATS_FAILED")
            return RecommendationStats()

        total = len(ensure_threads(threads))
        read = len({e.thread_id for e in ensure_read_events(read_events)})
        disliked_count = len({d.thread_id for d in ensure_disliked_threads(disliked)})
        return RecommendationStats(
            total_threads=total,
            read_threads=read,
            disliked_threads=disliked_count,
            available_for_recommendation=max(0, total - read - disliked_count),
        )
