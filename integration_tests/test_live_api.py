"""Smoke tests against a running FitTrack API.

Set FITTRACK_INTEGRATION_API_URL (and credentials for the authenticated
tests) to run them:

    FITTRACK_INTEGRATION_API_URL=http://localhost:8000/api pytest integration_tests
"""

import pytest

from fittrack.auth.credentials import MemoryCredentialStore
from fittrack.clients.endpoints import FitTrackAPI
from fittrack.clients.http import ApiClient
from fittrack.errors import ApiError, AuthenticationError
from fittrack.models.requests import LoginCredentials, PaginationParams
from fittrack.services import ActivityService, AuthService, SegmentService
from fittrack.state.store import AppStore


def _build(settings):
    client = ApiClient(settings=settings, credentials=MemoryCredentialStore())
    store = AppStore(client.credentials)
    return client, FitTrackAPI(client), store


class TestLiveApi:
    """End-to-end checks that need a live server."""

    @pytest.mark.asyncio
    async def test_protected_route_requires_login(self, live_settings):
        client, api, _ = _build(live_settings)
        async with client:
            with pytest.raises(AuthenticationError):
                await api.users.get_me()

    @pytest.mark.asyncio
    async def test_bad_login_is_rejected(self, live_settings):
        client, api, store = _build(live_settings)
        async with client:
            with pytest.raises(ApiError):
                await AuthService(api, store).login(
                    LoginCredentials("no-such-user", "definitely-wrong")
                )
        assert store.session.user is None

    @pytest.mark.asyncio
    async def test_login_feed_and_logout(self, live_settings, live_account):
        username, password = live_account
        client, api, store = _build(live_settings)
        auth = AuthService(api, store)

        async with client:
            user = await auth.login(LoginCredentials(username, password))
            assert user.username == username

            profile = await auth.get_profile()
            assert profile.id == user.id

            activities = await ActivityService(api, store).list_activities(
                PaginationParams(limit=5)
            )
            assert len(activities) <= 5

            await SegmentService(api).list_segments(PaginationParams(limit=5))

            await auth.logout()
            assert not await auth.is_authenticated()
