"""User lookups and profile data."""

from ..clients.endpoints import FitTrackAPI, unwrap_items
from ..models.activity import Activity
from ..models.requests import PaginationParams, UserActivitiesParams
from ..models.segment import Segment
from ..models.user import User


class UserService:
    """Read-mostly access to other users."""

    def __init__(self, api: FitTrackAPI):
        self.api = api

    async def get_user_by_id(self, user_id: int) -> User:
        return User.from_dict(await self.api.users.get_by_id(user_id))

    async def get_user_by_username(self, username: str) -> User:
        return User.from_dict(await self.api.users.get_by_username(username))

    async def search_users(self, query: str, limit: int = 10) -> list[User]:
        return [User.from_dict(u) for u in unwrap_items(await self.api.users.search(query, limit))]

    async def get_user_stats(self, user_id: int) -> dict:
        return await self.api.users.get_stats(user_id) or {}

    async def get_user_activities(
        self, user_id: int, params: UserActivitiesParams | None = None
    ) -> list[Activity]:
        payload = await self.api.users.get_activities(user_id, params)
        return [Activity.from_dict(a) for a in unwrap_items(payload)]

    async def get_user_segments(self, user_id: int) -> list[Segment]:
        payload = await self.api.users.get_segments(user_id)
        return [Segment.from_dict(s) for s in unwrap_items(payload)]

    async def get_user_followers(
        self, user_id: int, params: PaginationParams | None = None
    ) -> list[User]:
        payload = await self.api.users.get_followers(user_id, params)
        return [User.from_dict(u) for u in unwrap_items(payload)]

    async def get_user_following(
        self, user_id: int, params: PaginationParams | None = None
    ) -> list[User]:
        payload = await self.api.users.get_following(user_id, params)
        return [User.from_dict(u) for u in unwrap_items(payload)]

    async def get_user_kudos(
        self, user_id: int, params: PaginationParams | None = None
    ) -> list[dict]:
        return unwrap_items(await self.api.users.get_kudos(user_id, params))
