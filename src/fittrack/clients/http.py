"""HTTP client for the FitTrack API.

Wraps ``httpx.AsyncClient`` with bearer authentication and the single-retry
refresh contract:

- Every request carries ``Authorization: Bearer <access token>`` when a token
  is stored.
- A 401 on a request that has not been retried triggers one
  ``POST /auth/refresh`` (sent outside this wrapper), stores the new access
  token and replays the request once.
- If the refresh fails, both tokens are cleared, the expiry listeners are
  called and ``SessionExpiredError`` is raised.
- Network errors and other error statuses are not retried.
"""

from collections.abc import Callable
from typing import Any

import httpx
from loguru import logger

from ..auth.credentials import CredentialStore, MemoryCredentialStore
from ..auth.refresh import RefreshCycle
from ..config import Settings, get_settings
from ..errors import ApiError, SessionExpiredError
from ..models.user import TokenPair

REFRESH_PATH = "/auth/refresh"


class ApiClient:
    """Authenticated async client for the FitTrack REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        credentials: CredentialStore | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        on_session_expired: Callable[[], None] | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.credentials = credentials or MemoryCredentialStore()
        self._expiry_listeners: list[Callable[[], None]] = []
        if on_session_expired is not None:
            self._expiry_listeners.append(on_session_expired)
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def add_expiry_listener(self, listener: Callable[[], None]) -> None:
        """Call listener whenever a failed refresh ends the session."""
        self._expiry_listeners.append(listener)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict | None = None,
        json: Any = None,
        files: dict | None = None,
    ) -> httpx.Response:
        """Send a request, refreshing the access token once on 401.

        Returns the successful response.

        Raises:
            SessionExpiredError: the refresh token was rejected
            AuthenticationError: 401 after the replay
            ApiError: any other error status
            httpx.RequestError: network failures, unchanged
        """
        cycle = RefreshCycle()
        access_token = await self.credentials.get_access_token()

        logger.debug(f"{method} {path}")
        response = await self._send(method, path, access_token, params, json, files)

        if cycle.should_refresh(response.status_code):
            cycle.begin_refresh()
            try:
                access_token = await self._refresh_access_token()
            except (ApiError, httpx.HTTPError, ValueError) as exc:
                cycle.fail()
                await self._expire_session()
                raise SessionExpiredError(response) from exc

            cycle.begin_replay()
            logger.debug(f"Replaying {method} {path} with refreshed token")
            response = await self._send(method, path, access_token, params, json, files)

        cycle.finish()

        if response.is_error:
            raise ApiError.from_response(response)
        return response

    async def get(self, path: str, *, params: dict | None = None) -> httpx.Response:
        return await self.request("GET", path, params=params)

    async def post(
        self, path: str, *, json: Any = None, params: dict | None = None
    ) -> httpx.Response:
        return await self.request("POST", path, json=json, params=params)

    async def put(
        self, path: str, *, json: Any = None, files: dict | None = None
    ) -> httpx.Response:
        return await self.request("PUT", path, json=json, files=files)

    async def delete(self, path: str, *, json: Any = None) -> httpx.Response:
        return await self.request("DELETE", path, json=json)

    async def _send(
        self,
        method: str,
        path: str,
        access_token: str | None,
        params: dict | None,
        json: Any,
        files: dict | None,
    ) -> httpx.Response:
        # Built fresh each time so a replay never reuses a consumed body stream
        headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
        request = self._http.build_request(
            method,
            path,
            params=params,
            json=json,
            files=files,
            headers=headers,
        )
        return await self._http.send(request)

    async def _refresh_access_token(self) -> str:
        """Exchange the stored refresh token for a new access token."""
        refresh_token = await self.credentials.get_refresh_token()
        if not refresh_token:
            raise ValueError("No refresh token stored")

        logger.info("Access token rejected, refreshing")
        response = await self._http.post(
            REFRESH_PATH, json={"refresh_token": refresh_token}
        )
        if response.is_error:
            logger.warning(f"Token refresh failed with status {response.status_code}")
            raise ApiError.from_response(response)

        data = response.json()
        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise ValueError("Refresh response did not contain an access token")

        # Some servers rotate the refresh token as well
        rotated = data.get("refresh_token")
        if rotated:
            await self.credentials.store(TokenPair(access_token, rotated))
        else:
            await self.credentials.set_access_token(access_token)
        logger.info("Access token refreshed")
        return access_token

    async def _expire_session(self) -> None:
        await self.credentials.clear()
        logger.warning("Session expired, stored tokens cleared")
        for listener in list(self._expiry_listeners):
            listener()

