"""Endpoint groups for the FitTrack REST API.

Thin wrappers: each method maps to one route and returns the decoded JSON
body (or None for empty responses).
"""

from typing import Any

import httpx

from ..models.requests import (
    ChangePasswordData,
    CreateActivityData,
    LoginCredentials,
    PaginationParams,
    RegisterData,
    ResetPasswordData,
    UpdateActivityData,
    UpdateProfileData,
    UserActivitiesParams,
)
from .http import ApiClient


def _body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def unwrap_items(payload: Any) -> list:
    """List payloads arrive either bare or wrapped in {"items": [...]}."""
    if isinstance(payload, dict):
        return payload.get("items", [])
    return payload or []


def _params(params: PaginationParams | None) -> dict | None:
    return params.to_params() if params else None


class _EndpointGroup:
    def __init__(self, client: ApiClient):
        self.client = client


class AuthAPI(_EndpointGroup):
    """/auth routes."""

    async def register(self, data: RegisterData) -> Any:
        return _body(await self.client.post("/auth/register", json=data.to_payload()))

    async def login(self, data: LoginCredentials) -> Any:
        return _body(await self.client.post("/auth/login", json=data.to_payload()))

    async def logout(self) -> Any:
        return _body(await self.client.post("/auth/logout"))

    async def refresh(self, refresh_token: str) -> Any:
        return _body(
            await self.client.post("/auth/refresh", json={"refresh_token": refresh_token})
        )

    async def forgot_password(self, email: str) -> Any:
        return _body(await self.client.post("/auth/forgot-password", json={"email": email}))

    async def reset_password(self, data: ResetPasswordData) -> Any:
        return _body(await self.client.post("/auth/reset-password", json=data.to_payload()))

    async def change_password(self, data: ChangePasswordData) -> Any:
        return _body(await self.client.post("/auth/change-password", json=data.to_payload()))

    async def verify_email(self, token: str) -> Any:
        return _body(await self.client.post("/auth/verify-email", json={"token": token}))

    async def resend_verification(self) -> Any:
        return _body(await self.client.post("/auth/resend-verification"))

    async def resend_reset(self, email: str) -> Any:
        return _body(await self.client.post("/auth/resend-reset", json={"email": email}))

    async def send_otp(self, email: str) -> Any:
        return _body(await self.client.post("/auth/send-otp", json={"email": email}))

    async def verify_otp(self, email: str, otp: str) -> Any:
        return _body(
            await self.client.post("/auth/verify-otp", json={"email": email, "otp": otp})
        )


class UserAPI(_EndpointGroup):
    """/users routes."""

    async def get_me(self) -> Any:
        return _body(await self.client.get("/users/me"))

    async def update_me(self, data: UpdateProfileData) -> Any:
        return _body(await self.client.put("/users/me", json=data.to_payload()))

    async def get_by_username(self, username: str) -> Any:
        return _body(await self.client.get(f"/users/{username}"))

    async def get_by_id(self, user_id: int) -> Any:
        return _body(await self.client.get(f"/users/{user_id}"))

    async def search(self, query: str, limit: int = 10) -> Any:
        return _body(
            await self.client.get("/users/search", params={"query": query, "limit": limit})
        )

    async def update_avatar(
        self, filename: str, content: bytes, content_type: str = "application/octet-stream"
    ) -> Any:
        files = {"avatar": (filename, content, content_type)}
        return _body(await self.client.put("/users/me/avatar", files=files))

    async def delete_me(self, password: str) -> Any:
        return _body(await self.client.delete("/users/me", json={"password": password}))

    async def get_stats(self, user_id: int) -> Any:
        return _body(await self.client.get(f"/users/{user_id}/stats"))

    async def get_activities(
        self, user_id: int, params: UserActivitiesParams | None = None
    ) -> Any:
        return _body(
            await self.client.get(f"/users/{user_id}/activities", params=_params(params))
        )

    async def get_segments(self, user_id: int) -> Any:
        return _body(await self.client.get(f"/users/{user_id}/segments"))

    async def get_followers(self, user_id: int, params: PaginationParams | None = None) -> Any:
        return _body(
            await self.client.get(f"/users/{user_id}/followers", params=_params(params))
        )

    async def get_following(self, user_id: int, params: PaginationParams | None = None) -> Any:
        return _body(
            await self.client.get(f"/users/{user_id}/following", params=_params(params))
        )

    async def get_kudos(self, user_id: int, params: PaginationParams | None = None) -> Any:
        return _body(await self.client.get(f"/users/{user_id}/kudos", params=_params(params)))


class ActivityAPI(_EndpointGroup):
    """/activities routes."""

    async def create(self, data: CreateActivityData) -> Any:
        return _body(await self.client.post("/activities", json=data.to_payload()))

    async def list_all(self, params: PaginationParams | None = None) -> Any:
        return _body(await self.client.get("/activities", params=_params(params)))

    async def get(self, activity_id: int) -> Any:
        return _body(await self.client.get(f"/activities/{activity_id}"))

    async def update(self, activity_id: int, data: UpdateActivityData) -> Any:
        return _body(
            await self.client.put(f"/activities/{activity_id}", json=data.to_payload())
        )

    async def delete(self, activity_id: int) -> Any:
        return _body(await self.client.delete(f"/activities/{activity_id}"))

    async def upload_gps_points(self, activity_id: int, points: list[dict]) -> Any:
        return _body(
            await self.client.post(
                f"/activities/{activity_id}/gps-points", json={"points": points}
            )
        )

    async def complete(self, activity_id: int) -> Any:
        return _body(await self.client.post(f"/activities/{activity_id}/complete"))


class SegmentAPI(_EndpointGroup):
    """/segments routes."""

    async def create(self, data: dict) -> Any:
        return _body(await self.client.post("/segments", json=data))

    async def list_all(self, params: PaginationParams | None = None) -> Any:
        return _body(await self.client.get("/segments", params=_params(params)))

    async def get(self, segment_id: int) -> Any:
        return _body(await self.client.get(f"/segments/{segment_id}"))

    async def get_leaderboard(self, segment_id: int) -> Any:
        return _body(await self.client.get(f"/segments/{segment_id}/leaderboard"))

    async def delete(self, segment_id: int) -> Any:
        return _body(await self.client.delete(f"/segments/{segment_id}"))


class SocialAPI(_EndpointGroup):
    """/social routes."""

    async def follow(self, user_id: int) -> Any:
        return _body(await self.client.post(f"/social/follow/{user_id}"))

    async def unfollow(self, user_id: int) -> Any:
        return _body(await self.client.delete(f"/social/follow/{user_id}"))

    async def get_followers(self, user_id: int) -> Any:
        return _body(await self.client.get(f"/social/followers/{user_id}"))

    async def get_following(self, user_id: int) -> Any:
        return _body(await self.client.get(f"/social/following/{user_id}"))

    async def give_kudos(self, activity_id: int) -> Any:
        return _body(await self.client.post(f"/social/kudos/{activity_id}"))

    async def remove_kudos(self, activity_id: int) -> Any:
        return _body(await self.client.delete(f"/social/kudos/{activity_id}"))

    async def add_comment(self, activity_id: int, content: str) -> Any:
        return _body(
            await self.client.post(f"/social/comments/{activity_id}", json={"content": content})
        )

    async def get_comments(self, activity_id: int) -> Any:
        return _body(await self.client.get(f"/social/comments/{activity_id}"))


class FitTrackAPI:
    """All endpoint groups bound to one client."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.auth = AuthAPI(client)
        self.users = UserAPI(client)
        self.activities = ActivityAPI(client)
        self.segments = SegmentAPI(client)
        self.social = SocialAPI(client)
