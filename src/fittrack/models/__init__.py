"""Data models for fittrack."""

from .activity import Activity, ActivityStatus, ActivityType, Comment
from .requests import (
    ChangePasswordData,
    CreateActivityData,
    LoginCredentials,
    PaginationParams,
    RegisterData,
    ResetPasswordData,
    UpdateActivityData,
    UpdateProfileData,
    UserActivitiesParams,
)
from .segment import Segment, SegmentEffort
from .user import TokenPair, User

__all__ = [
    "Activity",
    "ActivityStatus",
    "ActivityType",
    "ChangePasswordData",
    "Comment",
    "CreateActivityData",
    "LoginCredentials",
    "PaginationParams",
    "RegisterData",
    "ResetPasswordData",
    "Segment",
    "SegmentEffort",
    "TokenPair",
    "UpdateActivityData",
    "UpdateProfileData",
    "User",
    "UserActivitiesParams",
]
