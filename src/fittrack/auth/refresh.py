"""Single-retry token refresh bookkeeping.

Each request sent through the API client owns one ``RefreshCycle``. A 401
moves the cycle from IDLE to REFRESHING; a successful refresh moves it to
REPLAYING and the replay's outcome ends it in DONE. A failed refresh ends it
in FAILED. A cycle that has left IDLE can never refresh again, which is what
limits every request to one replay.
"""

from enum import Enum

from ..errors import InvalidTransitionError


class RefreshState(str, Enum):
    IDLE = "idle"
    REFRESHING = "refreshing"
    REPLAYING = "replaying"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[RefreshState, set[RefreshState]] = {
    RefreshState.IDLE: {RefreshState.REFRESHING, RefreshState.DONE},
    RefreshState.REFRESHING: {RefreshState.REPLAYING, RefreshState.FAILED},
    RefreshState.REPLAYING: {RefreshState.DONE},
    RefreshState.DONE: set(),
    RefreshState.FAILED: set(),
}


class RefreshCycle:
    """Tracks the refresh/replay progress of one request."""

    def __init__(self):
        self.state = RefreshState.IDLE
        self.history: list[RefreshState] = [RefreshState.IDLE]

    @property
    def retried(self) -> bool:
        return self.state is not RefreshState.IDLE

    def should_refresh(self, status_code: int) -> bool:
        """Whether a response with this status triggers a refresh."""
        return status_code == 401 and not self.retried

    def begin_refresh(self) -> None:
        self._move(RefreshState.REFRESHING)

    def begin_replay(self) -> None:
        self._move(RefreshState.REPLAYING)

    def fail(self) -> None:
        self._move(RefreshState.FAILED)

    def finish(self) -> None:
        self._move(RefreshState.DONE)

    def _move(self, target: RefreshState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidTransitionError(
                f"Cannot move refresh cycle from {self.state.value} to {target.value}"
            )
        self.state = target
        self.history.append(target)
