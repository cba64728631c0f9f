"""Application state: immutable slices, pure reducers, one container."""

from .activities import ActivityState
from .session import SessionState
from .store import AppStore
from .ui import Theme, UIState

__all__ = [
    "ActivityState",
    "AppStore",
    "SessionState",
    "Theme",
    "UIState",
]
