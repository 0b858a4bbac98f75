"""
Shared builders for the recommender tests.

All times are relative to a fixed NOW so freshness and decay are deterministic.
"""

import random
from datetime import datetime, timedelta, timezone

import pytest

from forum_recommender import (
    InMemoryClickedStore,
    InMemorySettingsStore,
    InMemoryThreadStore,
    RecommendationEngine,
)
from forum_recommender.models import DislikedThread, ReadEvent, Thread

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_thread(thread_id, title="", category=None, tags=None, hours_ago=12.0, forum_id="f1", **extra):
    """Thread published hours_ago before NOW (None → undated)."""
    published = NOW - timedelta(hours=hours_ago) if hours_ago is not None else None
    return Thread(
        thread_id=thread_id,
        forum_id=forum_id,
        title=title,
        category=category,
        tags=tags or [],
        published_at=published,
        **extra,
    )


def make_read(thread_id, completed=True, hours_ago=24.0, category=None, tags=None, **extra):
    return ReadEvent(
        thread_id=thread_id,
        completed=1 if completed else 0,
        created_at=NOW - timedelta(hours=hours_ago),
        category=category,
        tags=tags or [],
        **extra,
    )


def make_disliked(thread_id, title="", category=None, tags=None):
    return DislikedThread(thread_id=thread_id, title=title, category=category, tags=tags or [])


def build_engine(threads=(), read_events=(), disliked=(), settings=None, clicked=(), seed=7, config=None):
    """Engine over in-memory stores, seeded rng, and the fixed clock."""
    engine = RecommendationEngine(
        InMemoryThreadStore(list(threads), list(read_events), list(disliked)),
        InMemorySettingsStore(settings or {}),
        InMemoryClickedStore(clicked),
        config=config,
        rng=random.Random(seed),
        clock=lambda: NOW,
    )
    return engine


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def forum_threads():
    """A small catalog across three categories."""
    return [
        make_thread("py-1", "Python asyncio event loop tips", "programming", ["python", "asyncio"], 2),
        make_thread("py-2", "Python packaging with pyproject", "programming", ["python", "packaging"], 30),
        make_thread("py-3", "Debugging asyncio tasks in python", "programming", ["python", "asyncio"], 50),
        make_thread("rs-1", "Rust borrow checker explained", "programming", ["rust"], 5),
        make_thread("ck-1", "Sourdough starter feeding schedule", "cooking", ["baking", "bread"], 8),
        make_thread("ck-2", "Cast iron pan seasoning", "cooking", ["cookware"], 72),
        make_thread("gm-1", "Speedrunning retro platformers", "gaming", ["retro", "speedrun"], 20),
        make_thread("gm-2", "Building a gaming pc on a budget", "gaming", ["hardware", "budget"], 100),
    ]
