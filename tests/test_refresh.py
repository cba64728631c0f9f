"""Tests for the refresh cycle state machine."""

import pytest

from fittrack.auth.refresh import RefreshCycle, RefreshState
from fittrack.errors import InvalidTransitionError


class TestRefreshCycle:
    """Tests for RefreshCycle transitions."""

    def test_plain_request(self):
        cycle = RefreshCycle()
        assert cycle.should_refresh(401)
        assert not cycle.should_refresh(403)
        cycle.finish()
        assert cycle.history == [RefreshState.IDLE, RefreshState.DONE]

    def test_refresh_then_replay(self):
        cycle = RefreshCycle()
        cycle.begin_refresh()
        cycle.begin_replay()

        assert cycle.retried
        assert not cycle.should_refresh(401)

        cycle.finish()
        assert cycle.state is RefreshState.DONE
        assert cycle.history == [
            RefreshState.IDLE,
            RefreshState.REFRESHING,
            RefreshState.REPLAYING,
            RefreshState.DONE,
        ]

    def test_failed_refresh(self):
        cycle = RefreshCycle()
        cycle.begin_refresh()
        cycle.fail()
        assert cycle.state is RefreshState.FAILED

    def test_cannot_refresh_twice(self):
        cycle = RefreshCycle()
        cycle.begin_refresh()
        cycle.begin_replay()
        with pytest.raises(InvalidTransitionError):
            cycle.begin_refresh()

    def test_terminal_states(self):
        cycle = RefreshCycle()
        cycle.begin_refresh()
        cycle.fail()
        with pytest.raises(InvalidTransitionError):
            cycle.finish()

    def test_replay_requires_refresh(self):
        with pytest.raises(InvalidTransitionError):
            RefreshCycle().begin_replay()
