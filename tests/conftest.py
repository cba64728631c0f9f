"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import httpx
import pytest

from fittrack.auth.credentials import MemoryCredentialStore
from fittrack.clients.endpoints import FitTrackAPI
from fittrack.clients.http import ApiClient
from fittrack.config import Settings
from fittrack.models.user import TokenPair
from fittrack.state.store import AppStore

BASE_URL = "http://testserver/api"


class FakeApi:
    """Scripted stand-in for the FitTrack REST API.

    Routes are keyed by method and path (without the /api prefix). Each route
    holds a queue of replies; the last reply repeats once the queue is down
    to one. A reply is a (status, body) tuple or a callable taking the
    request and returning an ``httpx.Response``.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], list] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, *replies) -> "FakeApi":
        self.routes.setdefault((method.upper(), path), []).extend(replies)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        queue = self.routes.get((request.method, path))
        if not queue:
            return httpx.Response(404, json={"detail": f"No route for {request.method} {path}"})
        reply = queue[0] if len(queue) == 1 else queue.pop(0)
        if callable(reply):
            return reply(request)
        status, body = reply
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method.upper() and r.url.path.removeprefix("/api") == path
        ]

    def json_body(self, request: httpx.Request) -> dict:
        return json.loads(request.content)


@pytest.fixture
def temp_db_path(tmp_path):
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a temporary data directory."""
    return Settings(
        api_url=BASE_URL,
        data_dir=tmp_path / "data",
        credential_backend="sqlite",
        log_level="WARNING",
    )


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def user_payload():
    """A user as the API returns it."""
    return {
        "id": 1,
        "email": "alice@example.com",
        "username": "alice",
        "full_name": "Alice Runner",
        "bio": "Trail runner",
        "profile_picture": None,
        "location": "Boulder, CO",
        "created_at": "2024-01-15T08:30:00Z",
    }


@pytest.fixture
def make_activity_payload(user_payload):
    """Factory for activity payloads."""

    def _make(activity_id: int = 10, **overrides) -> dict:
        data = {
            "id": activity_id,
            "user_id": user_payload["id"],
            "title": f"Activity {activity_id}",
            "description": None,
            "activity_type": "run",
            "status": "completed",
            "distance": 5000.0,
            "duration": 1500,
            "elevation_gain": 42.0,
            "elevation_loss": 40.0,
            "calories": 350.0,
            "avg_speed": 3.33,
            "max_speed": 4.1,
            "avg_heart_rate": 150,
            "max_heart_rate": 172,
            "started_at": "2024-03-01T07:00:00Z",
            "completed_at": "2024-03-01T07:25:00Z",
            "user": user_payload,
            "kudos_count": 2,
            "comments_count": 1,
            "has_kudos": False,
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def make_client(fake_api, settings):
    """Factory for an ApiClient wired to the fake API with in-memory tokens."""

    def _make(access_token=None, refresh_token=None, on_session_expired=None) -> ApiClient:
        return ApiClient(
            BASE_URL,
            MemoryCredentialStore(TokenPair(access_token, refresh_token)),
            transport=fake_api.transport,
            on_session_expired=on_session_expired,
            settings=settings,
        )

    return _make


@pytest.fixture
def make_app(make_client):
    """Factory for (client, api, store) sharing one credential store."""

    def _make(access_token=None, refresh_token=None, persistence=None):
        client = make_client(access_token, refresh_token)
        store = AppStore(client.credentials, persistence)
        return client, FitTrackAPI(client), store

    return _make


@pytest.fixture
def data_dir(settings) -> Path:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings.data_dir
