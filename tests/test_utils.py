"""Tests for formatting helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from fittrack.models.activity import Activity, ActivityType
from fittrack.utils.formatting import (
    ACTIVITY_TYPE_COLORS,
    capitalize,
    format_calories,
    format_distance,
    format_duration,
    format_elevation,
    format_pace,
    format_relative_time,
    format_speed,
    format_summary,
    get_activity_type_color,
    get_initials,
    summarize_activities,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestUnits:
    """Tests for distance, time and speed formatting."""

    @pytest.mark.parametrize(
        "meters,expected",
        [(0, "0 m"), (850.4, "850 m"), (1000, "1.00 km"), (1500, "1.50 km"), (21100, "21.10 km")],
    )
    def test_format_distance(self, meters, expected):
        assert format_distance(meters) == expected

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "0:00"), (59, "0:59"), (754, "12:34"), (3600, "1:00:00"), (3723, "1:02:03")],
    )
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_format_pace(self):
        """Test pace in minutes per kilometre."""
        assert format_pace(1000 / 300) == "5:00 /km"
        assert format_pace(0) == "-"
        assert format_pace(-1) == "-"

    def test_format_pace_rounds_up_to_next_minute(self):
        # 359.8 s/km rounds to 6:00, not 5:60
        assert format_pace(1000 / 359.8) == "6:00 /km"

    def test_format_speed(self):
        assert format_speed(10) == "36.0 km/h"

    def test_elevation_and_calories(self):
        assert format_elevation(123.6) == "124 m"
        assert format_calories(420.2) == "420 cal"


class TestRelativeTime:
    """Tests for format_relative_time."""

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(seconds=30), "just now"),
            (timedelta(minutes=1), "1 minute ago"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(hours=3), "3 hours ago"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=10), "1 week ago"),
            (timedelta(days=60), "2 months ago"),
            (timedelta(days=800), "2 years ago"),
        ],
    )
    def test_ranges(self, delta, expected):
        assert format_relative_time(NOW - delta, NOW) == expected


class TestText:
    def test_capitalize(self):
        assert capitalize("run") == "Run"
        assert capitalize("") == ""

    def test_initials(self):
        assert get_initials("alice cooper smith") == "AC"

    def test_type_color(self):
        assert get_activity_type_color("ride") == ACTIVITY_TYPE_COLORS[ActivityType.RIDE]
        assert get_activity_type_color("yoga") == ACTIVITY_TYPE_COLORS[ActivityType.OTHER]


class TestSummary:
    """Tests for activity summaries."""

    def _activity(self, activity_id, days_ago, activity_type=ActivityType.RUN):
        return Activity(
            id=activity_id,
            user_id=1,
            title="x",
            activity_type=activity_type,
            distance=5000,
            duration=1800,
            elevation_gain=50,
            calories=300,
            started_at=NOW - timedelta(days=days_ago),
        )

    def test_summarize_window(self):
        """Test that activities before the window are ignored."""
        activities = [
            self._activity(1, 1),
            self._activity(2, 3, ActivityType.RIDE),
            self._activity(3, 10),
        ]
        summary = summarize_activities(activities, since=NOW - timedelta(days=7))

        assert summary.count == 2
        assert summary.distance == 10000
        assert summary.duration == 3600
        assert summary.by_type == {ActivityType.RUN: 1, ActivityType.RIDE: 1}

    def test_format_summary(self):
        summary = summarize_activities([self._activity(1, 1), self._activity(2, 2)])
        text = format_summary(summary, title="Last 7 days")

        assert text.startswith("Last 7 days")
        assert "Activities: 2" in text
        assert "10.00 km" in text
        assert "Run: 2" in text
