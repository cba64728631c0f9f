"""Display formatting for activity data."""

from dataclasses import dataclass
from datetime import datetime, timezone

from ..models.activity import Activity, ActivityType

ACTIVITY_TYPE_COLORS = {
    ActivityType.RUN: "#FC4C02",
    ActivityType.RIDE: "#00D4FF",
    ActivityType.SWIM: "#00B4D8",
    ActivityType.WALK: "#90BE6D",
    ActivityType.HIKE: "#43AA8B",
    ActivityType.WORKOUT: "#9B5DE5",
    ActivityType.OTHER: "#6C757D",
}


def format_distance(meters: float) -> str:
    """Format meters as km above 1000, otherwise whole meters."""
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{round(meters)} m"


def format_duration(seconds: int) -> str:
    """Format seconds as h:mm:ss, or m:ss under an hour."""
    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_pace(meters_per_second: float) -> str:
    """Format a speed as minutes per kilometre."""
    if meters_per_second <= 0:
        return "-"
    seconds_per_km = 1000 / meters_per_second
    minutes = int(seconds_per_km // 60)
    seconds = round(seconds_per_km % 60)
    if seconds == 60:
        minutes, seconds = minutes + 1, 0
    return f"{minutes}:{seconds:02d} /km"


def format_speed(meters_per_second: float) -> str:
    return f"{meters_per_second * 3.6:.1f} km/h"


def format_elevation(meters: float) -> str:
    return f"{round(meters)} m"


def format_calories(calories: float) -> str:
    return f"{round(calories)} cal"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def format_relative_time(moment: datetime, now: datetime | None = None) -> str:
    """Describe a past moment relative to now ("3 hours ago")."""
    if now is None:
        now = datetime.now(timezone.utc) if moment.tzinfo else datetime.now()
    diff_seconds = int((now - moment).total_seconds())

    if diff_seconds < 60:
        return "just now"
    minutes = diff_seconds // 60
    if minutes < 60:
        return _plural(minutes, "minute")
    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")
    days = hours // 24
    if days < 7:
        return _plural(days, "day")
    weeks = days // 7
    if weeks < 4:
        return _plural(weeks, "week")
    months = days // 30
    if months < 12:
        return _plural(max(months, 1), "month")
    return _plural(days // 365, "year")


def get_activity_type_color(activity_type: ActivityType | str) -> str:
    if isinstance(activity_type, str):
        activity_type = ActivityType.parse(activity_type)
    return ACTIVITY_TYPE_COLORS.get(activity_type, ACTIVITY_TYPE_COLORS[ActivityType.OTHER])


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def get_initials(name: str) -> str:
    return "".join(part[0] for part in name.split(" ") if part).upper()[:2]


@dataclass
class ActivitySummary:
    """Totals over a set of activities."""

    count: int = 0
    distance: float = 0.0
    duration: int = 0
    elevation_gain: float = 0.0
    calories: float = 0.0
    by_type: dict[ActivityType, int] | None = None


def summarize_activities(
    activities: list[Activity] | tuple[Activity, ...],
    since: datetime | None = None,
) -> ActivitySummary:
    """Sum distance, time, climbing and calories, optionally from a start date."""
    summary = ActivitySummary(by_type={})
    for activity in activities:
        if since is not None and (activity.started_at is None or activity.started_at < since):
            continue
        summary.count += 1
        summary.distance += activity.distance
        summary.duration += activity.duration
        summary.elevation_gain += activity.elevation_gain
        summary.calories += activity.calories
        summary.by_type[activity.activity_type] = summary.by_type.get(activity.activity_type, 0) + 1
    return summary


def format_summary(summary: ActivitySummary, title: str = "This week") -> str:
    """Render a summary as text for the dashboard."""
    lines = [title]
    lines.append("=" * 40)
    lines.append(f"Activities: {summary.count}")
    lines.append(f"Distance:   {format_distance(summary.distance)}")
    lines.append(f"Time:       {format_duration(summary.duration)}")
    lines.append(f"Elevation:  {format_elevation(summary.elevation_gain)}")
    lines.append(f"Calories:   {format_calories(summary.calories)}")

    if summary.by_type:
        lines.append("\nBy type:")
        for activity_type, count in sorted(
            summary.by_type.items(), key=lambda x: x[1], reverse=True
        ):
            lines.append(f"  - {capitalize(activity_type.value)}: {count}")

    return "\n".join(lines)
