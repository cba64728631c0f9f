"""User data models."""

from dataclasses import dataclass
from datetime import datetime

from .common import format_timestamp, parse_timestamp


@dataclass
class User:
    """A FitTrack account as returned by the API."""

    id: int
    email: str
    username: str
    full_name: str | None = None
    bio: str | None = None
    profile_picture: str | None = None  # avatar URL
    location: str | None = None
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.username

    @property
    def initials(self) -> str:
        """Up to two initials from the display name."""
        parts = [p for p in self.display_name.split(" ") if p]
        return "".join(p[0] for p in parts).upper()[:2]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "full_name": self.full_name,
            "bio": self.bio,
            "profile_picture": self.profile_picture,
            "location": self.location,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create from an API payload."""
        return cls(
            id=data["id"],
            email=data.get("email", ""),
            username=data["username"],
            full_name=data.get("full_name"),
            bio=data.get("bio"),
            profile_picture=data.get("profile_picture"),
            location=data.get("location"),
            created_at=parse_timestamp(data.get("created_at")),
        )


@dataclass
class TokenPair:
    """Access and refresh tokens for an authenticated session."""

    access_token: str | None = None
    refresh_token: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.access_token and not self.refresh_token

