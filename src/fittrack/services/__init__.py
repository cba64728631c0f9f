"""Services combining API calls with application state."""

from .activity_service import ActivityService
from .auth_service import AuthService
from .segment_service import SegmentService, SocialService
from .user_service import UserService

__all__ = [
    "ActivityService",
    "AuthService",
    "SegmentService",
    "SocialService",
    "UserService",
]
