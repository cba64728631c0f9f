"""Activity data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .common import format_timestamp, parse_timestamp
from .user import User


class ActivityType(str, Enum):
    """Kinds of workout the API records."""

    RUN = "run"
    RIDE = "ride"
    SWIM = "swim"
    WALK = "walk"
    HIKE = "hike"
    WORKOUT = "workout"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "ActivityType":
        """Map an API value to a type, falling back to OTHER."""
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.OTHER


class ActivityStatus(str, Enum):
    """Recording status of an activity."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Activity:
    """A recorded workout."""

    id: int
    user_id: int
    title: str
    activity_type: ActivityType
    status: str = ActivityStatus.COMPLETED.value
    description: str | None = None
    distance: float = 0.0  # meters
    duration: int = 0  # seconds
    elevation_gain: float = 0.0
    elevation_loss: float = 0.0
    calories: float = 0.0
    avg_speed: float = 0.0  # m/s
    max_speed: float = 0.0  # m/s
    avg_heart_rate: int | None = None
    max_heart_rate: int | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    polyline: str | None = None
    user: User | None = None
    kudos_count: int = 0
    comments_count: int = 0
    has_kudos: bool = False

    @property
    def is_completed(self) -> bool:
        return self.status == ActivityStatus.COMPLETED.value

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "activity_type": self.activity_type.value,
            "status": self.status,
            "distance": self.distance,
            "duration": self.duration,
            "elevation_gain": self.elevation_gain,
            "elevation_loss": self.elevation_loss,
            "calories": self.calories,
            "avg_speed": self.avg_speed,
            "max_speed": self.max_speed,
            "avg_heart_rate": self.avg_heart_rate,
            "max_heart_rate": self.max_heart_rate,
            "started_at": format_timestamp(self.started_at),
            "completed_at": format_timestamp(self.completed_at),
            "polyline": self.polyline,
            "user": self.user.to_dict() if self.user else None,
            "kudos_count": self.kudos_count,
            "comments_count": self.comments_count,
            "has_kudos": self.has_kudos,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Activity":
        """Create from an API payload."""
        user_data = data.get("user")
        return cls(
            id=data["id"],
            user_id=data.get("user_id", user_data["id"] if user_data else 0),
            title=data.get("title", ""),
            description=data.get("description"),
            activity_type=ActivityType.parse(data.get("activity_type")),
            status=data.get("status", ActivityStatus.COMPLETED.value),
            distance=data.get("distance") or 0.0,
            duration=data.get("duration") or 0,
            elevation_gain=data.get("elevation_gain") or 0.0,
            elevation_loss=data.get("elevation_loss") or 0.0,
            calories=data.get("calories") or 0.0,
            avg_speed=data.get("avg_speed") or 0.0,
            max_speed=data.get("max_speed") or 0.0,
            avg_heart_rate=data.get("avg_heart_rate"),
            max_heart_rate=data.get("max_heart_rate"),
            started_at=parse_timestamp(data.get("started_at")),
            completed_at=parse_timestamp(data.get("completed_at")),
            polyline=data.get("polyline"),
            user=User.from_dict(user_data) if user_data else None,
            kudos_count=data.get("kudos_count") or 0,
            comments_count=data.get("comments_count") or 0,
            has_kudos=bool(data.get("has_kudos", False)),
        )


@dataclass
class Comment:
    """A comment left on an activity."""

    id: int
    activity_id: int
    content: str
    user: User | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict, activity_id: int | None = None) -> "Comment":
        user_data = data.get("user")
        return cls(
            id=data["id"],
            activity_id=data.get("activity_id", activity_id or 0),
            content=data.get("content", ""),
            user=User.from_dict(user_data) if user_data else None,
            created_at=parse_timestamp(data.get("created_at")),
        )
