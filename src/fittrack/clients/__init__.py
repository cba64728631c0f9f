"""REST client for the FitTrack API."""

from .endpoints import ActivityAPI, AuthAPI, FitTrackAPI, SegmentAPI, SocialAPI, UserAPI
from .http import ApiClient

__all__ = [
    "ActivityAPI",
    "ApiClient",
    "AuthAPI",
    "FitTrackAPI",
    "SegmentAPI",
    "SocialAPI",
    "UserAPI",
]
