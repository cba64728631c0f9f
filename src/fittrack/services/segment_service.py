"""Segments, leaderboards and the social graph."""

from ..clients.endpoints import FitTrackAPI, unwrap_items
from ..models.requests import PaginationParams
from ..models.segment import Segment, SegmentEffort
from ..models.user import User


class SegmentService:
    def __init__(self, api: FitTrackAPI):
        self.api = api

    async def list_segments(self, params: PaginationParams | None = None) -> list[Segment]:
        return [Segment.from_dict(s) for s in unwrap_items(await self.api.segments.list_all(params))]

    async def get_segment(self, segment_id: int) -> Segment:
        return Segment.from_dict(await self.api.segments.get(segment_id))

    async def get_leaderboard(self, segment_id: int) -> list[SegmentEffort]:
        """Efforts ordered by rank (best first)."""
        payload = await self.api.segments.get_leaderboard(segment_id)
        efforts = [SegmentEffort.from_dict(e) for e in unwrap_items(payload)]
        return sorted(efforts, key=lambda e: e.rank)

    async def create_segment(self, data: dict) -> Segment:
        return Segment.from_dict(await self.api.segments.create(data))

    async def delete_segment(self, segment_id: int) -> None:
        await self.api.segments.delete(segment_id)


class SocialService:
    def __init__(self, api: FitTrackAPI):
        self.api = api

    async def follow(self, user_id: int) -> None:
        await self.api.social.follow(user_id)

    async def unfollow(self, user_id: int) -> None:
        await self.api.social.unfollow(user_id)

    async def get_followers(self, user_id: int) -> list[User]:
        return [User.from_dict(u) for u in unwrap_items(await self.api.social.get_followers(user_id))]

    async def get_following(self, user_id: int) -> list[User]:
        return [User.from_dict(u) for u in unwrap_items(await self.api.social.get_following(user_id))]
