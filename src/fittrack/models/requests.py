"""Request payloads sent to the API."""

from dataclasses import asdict, dataclass
from datetime import date

from .activity import ActivityType
from .common import drop_none


@dataclass
class LoginCredentials:
    username: str
    password: str

    def to_payload(self) -> dict:
        return asdict(self)


@dataclass
class RegisterData:
    email: str
    username: str
    password: str
    full_name: str | None = None

    def to_payload(self) -> dict:
        data = asdict(self)
        if not data["full_name"]:
            data["full_name"] = None
        return drop_none(data)


@dataclass
class ResetPasswordData:
    token: str
    new_password: str

    def to_payload(self) -> dict:
        return asdict(self)


@dataclass
class ChangePasswordData:
    current_password: str
    new_password: str

    def to_payload(self) -> dict:
        return asdict(self)


@dataclass
class UpdateProfileData:
    """Partial profile update; unset fields are left untouched server-side."""

    full_name: str | None = None
    bio: str | None = None
    location: str | None = None
    profile_picture: str | None = None

    def to_payload(self) -> dict:
        return drop_none(asdict(self))

    @property
    def is_empty(self) -> bool:
        return not self.to_payload()


@dataclass
class CreateActivityData:
    title: str
    activity_type: ActivityType = ActivityType.RUN
    description: str | None = None

    def to_payload(self) -> dict:
        return drop_none(
            {
                "title": self.title,
                "activity_type": self.activity_type.value,
                "description": self.description or None,
            }
        )


@dataclass
class UpdateActivityData:
    title: str | None = None
    description: str | None = None

    def to_payload(self) -> dict:
        return drop_none(asdict(self))


@dataclass
class PaginationParams:
    skip: int | None = None
    limit: int | None = None

    def to_params(self) -> dict:
        return drop_none({"skip": self.skip, "limit": self.limit})


@dataclass
class UserActivitiesParams(PaginationParams):
    activity_type: ActivityType | None = None
    date_from: date | None = None
    date_to: date | None = None

    def to_params(self) -> dict:
        params = super().to_params()
        if self.activity_type is not None:
            params["activity_type"] = self.activity_type.value
        if self.date_from is not None:
            params["date_from"] = self.date_from.isoformat()
        if self.date_to is not None:
            params["date_to"] = self.date_to.isoformat()
        return params
