"""
Behavior profile tests.

Scenarios:
- No events: zero profile with the default scroll depth
- Decay: a recent read outweighs an old one
- Recent preferences only count reads inside the recent window
- Ties keep first-seen order
"""

import math

import pytest

from forum_recommender.stages.behavior_profile import build_behavior_profile

from conftest import NOW, make_read


class TestBehaviorProfile:
    def test_empty_profile(self):
        pattern = build_behavior_profile([], NOW)
        assert pattern.preferred_categories == []
        assert pattern.preferred_tags == []
        assert pattern.active_hours == []
        assert pattern.average_scroll_depth == 50
        assert pattern.average_reading_time == 0

    def test_recent_read_outweighs_old_reads(self):
        events = [
            make_read("a", category="cooking", hours_ago=24 * 60),
            make_read("b", category="cooking", hours_ago=24 * 61),
            make_read("c", category="gaming", hours_ago=1),
        ]
        pattern = build_behavior_profile(events, NOW)
        # exp(-2) * 2 < exp(~0)
        assert pattern.preferred_categories == ["gaming", "cooking"]

    def test_recent_preferences_window(self):
        events = [
            make_read("a", category="cooking", tags=["bread"], hours_ago=24 * 10),
            make_read("b", category="gaming", tags=["retro"], hours_ago=24 * 2),
        ]
        pattern = build_behavior_profile(events, NOW)
        assert pattern.recent_categories == ["gaming"]
        assert pattern.recent_tags == ["retro"]

    def test_ties_keep_first_seen_order(self):
        events = [
            make_read("a", tags=["rust", "python"], hours_ago=5),
            make_read("b", tags=["go"], hours_ago=5),
        ]
        pattern = build_behavior_profile(events, NOW)
        assert pattern.preferred_tags[:3] == ["rust", "python", "go"]

    def test_weighted_scroll_and_dwell(self):
        events = [
            make_read("a", hours_ago=0, max_scroll_pct=80, dwell_ms_effective=1000),
            make_read("b", hours_ago=24 * 30, max_scroll_pct=20, dwell_ms_effective=3000),
        ]
        pattern = build_behavior_profile(events, NOW)
        w = math.exp(-1)
        assert pattern.average_scroll_depth == pytest.approx((80 + 20 * w) / (1 + w))
        assert pattern.average_reading_time == pytest.approx((1000 + 3000 * w) / (1 + w))

    def test_active_hours_from_event_time(self):
        pattern = build_behavior_profile([make_read("a", hours_ago=3)], NOW)
        assert pattern.active_hours == [9]
