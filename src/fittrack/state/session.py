"""Session state slice and its reducers."""

from dataclasses import dataclass, fields, replace

from ..models.user import User

_USER_FIELDS = {f.name for f in fields(User)}


@dataclass(frozen=True)
class SessionState:
    """Who is logged in."""

    user: User | None = None
    is_authenticated: bool = False
    is_loading: bool = True

    def to_dict(self) -> dict:
        """Persisted part of the slice."""
        return {
            "user": self.user.to_dict() if self.user else None,
            "is_authenticated": self.is_authenticated,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionState":
        user_data = data.get("user")
        user = User.from_dict(user_data) if user_data else None
        return cls(
            user=user,
            is_authenticated=bool(data.get("is_authenticated")) and user is not None,
            is_loading=False,
        )


def set_user(state: SessionState, user: User | None) -> SessionState:
    return replace(state, user=user, is_authenticated=user is not None)


def set_authenticated(state: SessionState, value: bool) -> SessionState:
    return replace(state, is_authenticated=value)


def set_loading(state: SessionState, value: bool) -> SessionState:
    return replace(state, is_loading=value)


def update_user(state: SessionState, **changes) -> SessionState:
    """Merge the given fields into the current user, leaving the rest as is."""
    unknown = set(changes) - _USER_FIELDS
    if unknown:
        raise ValueError(f"Unknown user fields: {', '.join(sorted(unknown))}")
    if state.user is None:
        return state
    return replace(state, user=replace(state.user, **changes))


def logged_out(state: SessionState) -> SessionState:
    return replace(state, user=None, is_authenticated=False)
