"""Segment and leaderboard models."""

from dataclasses import dataclass
from datetime import datetime

from .activity import ActivityType
from .common import parse_timestamp
from .user import User


@dataclass
class Segment:
    """A fixed route section with a leaderboard."""

    id: int
    name: str
    distance: float  # meters
    elevation_gain: float
    avg_grade: float  # percent
    activity_type: ActivityType
    description: str | None = None
    efforts_count: int | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Segment":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            distance=data.get("distance") or 0.0,
            elevation_gain=data.get("elevation_gain") or 0.0,
            avg_grade=data.get("avg_grade") or 0.0,
            activity_type=ActivityType.parse(data.get("activity_type")),
            efforts_count=data.get("efforts_count"),
        )


@dataclass
class SegmentEffort:
    """One ranked attempt at a segment."""

    id: int
    user: User
    elapsed_time: int  # seconds
    avg_speed: float
    rank: int
    is_kom: bool = False
    is_pr: bool = False
    started_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "SegmentEffort":
        return cls(
            id=data["id"],
            user=User.from_dict(data["user"]),
            elapsed_time=data.get("elapsed_time") or 0,
            avg_speed=data.get("avg_speed") or 0.0,
            rank=data.get("rank") or 0,
            is_kom=bool(data.get("is_kom", False)),
            is_pr=bool(data.get("is_pr", False)),
            started_at=parse_timestamp(data.get("started_at")),
        )
