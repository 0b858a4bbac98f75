"""
Model parsing tests.

Scenarios:
- camelCase collaborator records parse into Thread / ReadEvent / DislikedThread
- Missing counts and tags default; publish time falls back to created_at
- Invalid records are skipped by the ensure_* helpers with a warning
- Negative metrics clamp to 0; scroll depth caps at 100
"""

from datetime import datetime, timezone

from forum_recommender.models import (
    ReadEvent,
    Thread,
    ensure_disliked_threads,
    ensure_read_events,
    ensure_threads,
    thread_map,
)


class TestThread:
    def test_camel_case_record(self):
        thread = Thread.model_validate({
            "threadId": "t1",
            "forumId": "f1",
            "title": "Hello",
            "tags": "python",
            "replyCount": None,
            "likeCount": 3,
            "createdAt": "2025-05-01T10:00:00",
        })
        assert thread.thread_id == "t1"
        assert thread.tags == ["python"]
        assert thread.reply_count == 0
        assert thread.like_count == 3
        assert thread.publish_time == datetime(2025, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_published_at_preferred(self):
        thread = Thread(
            thread_id="t",
            published_at=datetime(2025, 5, 2, tzinfo=timezone.utc),
            created_at=datetime(2025, 5, 1, tzinfo=timezone.utc),
        )
        assert thread.publish_time.day == 2

    def test_ensure_threads_skips_invalid(self, caplog):
        threads = ensure_threads([{"threadId": "ok"}, {"title": "no id"}, Thread(thread_id="model")])
        assert [t.thread_id for t in threads] == ["ok", "model"]
        assert "THREAD_RECORDS_SKIPPED" in caplog.text

    def test_thread_map_first_wins(self):
        by_id = thread_map([Thread(thread_id="a", title="first"), Thread(thread_id="a", title="second")])
        assert by_id["a"].title == "first"


class TestReadEvents:
    def test_completed_coercion(self):
        assert ReadEvent(thread_id="a", completed=True).is_completed
        assert not ReadEvent(thread_id="a", completed=None).is_completed
        assert not ReadEvent(thread_id="a", completed=0).is_completed

    def test_negative_metrics_clamped(self):
        event = ReadEvent.model_validate({"threadId": "a", "maxScrollPct": -5, "dwellMsEffective": None})
        assert event.max_scroll_pct == 0.0
        assert event.dwell_ms_effective == 0.0

    def test_scroll_capped_at_hundred(self):
        event = ReadEvent.model_validate({"threadId": "a", "maxScrollPct": 150, "dwellMsEffective": 5000})
        assert event.max_scroll_pct == 100.0
        assert event.dwell_ms_effective == 5000.0

    def test_ensure_helpers(self):
        events = ensure_read_events([{"threadId": "a", "completed": 1}, {"completed": 1}])
        disliked = ensure_disliked_threads([{"threadId": "d", "tags": None}])
        assert [e.thread_id for e in events] == ["a"]
        assert disliked[0].tags == []

    def test_skipped_records_logged_per_model(self, caplog):
        ensure_read_events([{"completed": 1}])
        ensure_disliked_threads([{"title": "no id"}])
        assert "READ_EVENT_RECORDS_SKIPPED skipped=1 total=1" in caplog.text
        assert "DISLIKED_THREAD_RECORDS_SKIPPED skipped=1 total=1" in caplog.text
