"""Application state container.

``AppStore`` owns the three state slices and is passed explicitly to the
services and commands that need it. Slices are immutable; every change goes
through a reducer from the slice module, and listeners are told about slices
that actually changed.
"""

from collections.abc import Callable
from typing import Any

from loguru import logger

from ..auth.credentials import CredentialStore
from ..db.repositories import StateRepository
from ..models.activity import Activity
from ..models.user import User
from . import activities as activity_reducers
from . import session as session_reducers
from . import ui as ui_reducers
from .activities import ActivityState
from .session import SessionState
from .ui import Theme, UIState

# Persistence keys
AUTH_STORAGE_KEY = "auth-storage"
UI_STORAGE_KEY = "ui-storage"

SLICES = ("session", "activities", "ui")

Listener = Callable[[str, Any], None]


class AppStore:
    """Holds session, activity and UI state for one client."""

    def __init__(
        self,
        credentials: CredentialStore,
        persistence: StateRepository | None = None,
    ):
        self.credentials = credentials
        self.persistence = persistence
        self.session = SessionState()
        self.activities = ActivityState()
        self.ui = UIState()
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply(self, slice_name: str, reducer: Callable[..., Any], *args, **kwargs) -> Any:
        """Run a reducer against a slice and store the result."""
        if slice_name not in SLICES:
            raise ValueError(f"Unknown state slice: {slice_name}")
        current = getattr(self, slice_name)
        updated = reducer(current, *args, **kwargs)
        if updated != current:
            setattr(self, slice_name, updated)
            for listener in list(self._listeners):
                listener(slice_name, updated)
        return updated

    # Session

    def set_user(self, user: User | None) -> SessionState:
        return self.apply("session", session_reducers.set_user, user)

    def set_authenticated(self, value: bool) -> SessionState:
        return self.apply("session", session_reducers.set_authenticated, value)

    def set_session_loading(self, value: bool) -> SessionState:
        return self.apply("session", session_reducers.set_loading, value)

    def update_user(self, **changes) -> SessionState:
        return self.apply("session", session_reducers.update_user, **changes)

    def expire_session(self) -> SessionState:
        """Reset the session after the tokens were cleared elsewhere."""
        return self.apply("session", session_reducers.logged_out)

    async def logout(self) -> SessionState:
        """Clear stored tokens and reset the session."""
        await self.credentials.clear()
        return self.apply("session", session_reducers.logged_out)

    # Activities

    def set_activities(self, items: list[Activity]) -> ActivityState:
        return self.apply("activities", activity_reducers.set_activities, items)

    def add_activity(self, activity: Activity) -> ActivityState:
        return self.apply("activities", activity_reducers.add_activity, activity)

    def set_current_activity(self, activity: Activity | None) -> ActivityState:
        return self.apply("activities", activity_reducers.set_current_activity, activity)

    def update_activity(self, activity_id: int, **updates) -> ActivityState:
        return self.apply("activities", activity_reducers.update_activity, activity_id, **updates)

    def remove_activity(self, activity_id: int) -> ActivityState:
        return self.apply("activities", activity_reducers.remove_activity, activity_id)

    def set_activities_loading(self, value: bool) -> ActivityState:
        return self.apply("activities", activity_reducers.set_loading, value)

    # UI

    def toggle_sidebar(self) -> UIState:
        return self.apply("ui", ui_reducers.toggle_sidebar)

    def set_sidebar_open(self, value: bool) -> UIState:
        return self.apply("ui", ui_reducers.set_sidebar_open, value)

    def set_theme(self, theme: Theme) -> UIState:
        return self.apply("ui", ui_reducers.set_theme, theme)

    # Persistence

    async def hydrate(self) -> None:
        """Restore persisted session and UI slices."""
        if self.persistence is None:
            self.set_session_loading(False)
            return

        auth_data = await self.persistence.get(AUTH_STORAGE_KEY)
        if auth_data:
            self.apply("session", lambda _state: SessionState.from_dict(auth_data))
        ui_data = await self.persistence.get(UI_STORAGE_KEY)
        if ui_data:
            self.apply("ui", lambda _state: UIState.from_dict(ui_data))
        self.set_session_loading(False)
        logger.debug("Application state hydrated")

    async def persist(self) -> None:
        """Save the session and UI slices."""
        if self.persistence is None:
            return
        await self.persistence.set(AUTH_STORAGE_KEY, self.session.to_dict())
        await self.persistence.set(UI_STORAGE_KEY, self.ui.to_dict())
