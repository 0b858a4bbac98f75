"""
Tag branch tests.

Scenarios:
- Top tags come from the catalog threads behind completed reads
- Read, disliked, clicked, and loosely disliked-tag threads are excluded
- Newest first; force refresh re-admits clicked threads
- No reads / no tags → empty
"""

import random

from forum_recommender.models import PreferenceSettings, thread_map
from forum_recommender.stages.tag_branch import recommend_by_tags, top_read_tags

from conftest import make_read, make_thread


def _run(threads, reads, disliked_ids=(), clicked=(), settings=None, **kwargs):
    return [
        t.thread_id
        for t in recommend_by_tags(
            threads,
            reads,
            set(disliked_ids),
            set(clicked),
            thread_map(threads),
            settings=settings,
            **kwargs,
        )
    ]


class TestTopReadTags:
    def test_counts_catalog_tags_of_completed_reads(self):
        threads = [make_thread("a", tags=["python", "asyncio"]), make_thread("b", tags=["python"])]
        reads = [make_read("a", tags=["ignored"]), make_read("b"), make_read("missing")]
        assert top_read_tags(reads, thread_map(threads)) == ["python", "asyncio"]


class TestRecommendByTags:
    def setup_method(self):
        self.threads = [
            make_thread("read", tags=["python"], hours_ago=50),
            make_thread("new", tags=["python", "web"], hours_ago=1),
            make_thread("older", tags=["python"], hours_ago=10),
            make_thread("other", tags=["rust"], hours_ago=2),
            make_thread("disliked", tags=["python"], hours_ago=3),
            make_thread("clicked", tags=["python"], hours_ago=4),
            make_thread("ai", tags=["python", "ai-news"], hours_ago=5),
        ]
        self.reads = [make_read("read")]

    def test_filters_and_orders(self):
        ids = _run(
            self.threads,
            self.reads,
            disliked_ids=["disliked"],
            clicked=["clicked"],
            settings=PreferenceSettings(disliked_tags=["ai"]),
        )
        assert ids == ["new", "older"]

    def test_force_refresh_includes_clicked(self):
        ids = _run(self.threads, self.reads, clicked=["clicked"], force_refresh=True, rng=random.Random(1))
        assert "clicked" in ids

    def test_forum_filter(self):
        threads = self.threads + [make_thread("elsewhere", tags=["python"], forum_id="f2")]
        assert _run(threads, self.reads, forum="f2") == ["elsewhere"]

    def test_limit(self):
        assert len(_run(self.threads, self.reads, limit=2)) == 2

    def test_no_reads(self):
        assert _run(self.threads, []) == []

    def test_reads_without_tags(self):
        threads = [make_thread("a"), make_thread("b", tags=["python"])]
        assert _run(threads, [make_read("a")]) == []

    def test_incomplete_reads_do_not_seed_tags(self):
        assert _run(self.threads, [make_read("read", completed=False)]) == []
