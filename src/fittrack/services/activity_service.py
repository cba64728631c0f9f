"""Activity feed operations that keep the activity store in sync."""

from dataclasses import replace

from ..clients.endpoints import FitTrackAPI, unwrap_items
from ..models.activity import Activity, Comment
from ..models.requests import CreateActivityData, PaginationParams, UpdateActivityData
from ..state.store import AppStore


class ActivityService:
    """Activity CRUD, kudos and comments."""

    def __init__(self, api: FitTrackAPI, store: AppStore):
        self.api = api
        self.store = store

    async def list_activities(self, params: PaginationParams | None = None) -> list[Activity]:
        """Load the feed into the store."""
        self.store.set_activities_loading(True)
        try:
            payload = await self.api.activities.list_all(params)
            activities = [Activity.from_dict(a) for a in unwrap_items(payload)]
            self.store.set_activities(activities)
            return activities
        finally:
            self.store.set_activities_loading(False)

    async def get_activity(self, activity_id: int) -> Activity:
        activity = Activity.from_dict(await self.api.activities.get(activity_id))
        self.store.set_current_activity(activity)
        return activity

    async def create_activity(self, data: CreateActivityData) -> Activity:
        activity = Activity.from_dict(await self.api.activities.create(data))
        self.store.add_activity(activity)
        return activity

    async def update_activity(self, activity_id: int, data: UpdateActivityData) -> Activity:
        activity = Activity.from_dict(await self.api.activities.update(activity_id, data))
        self._merge(activity_id, **data.to_payload())
        return activity

    async def delete_activity(self, activity_id: int) -> None:
        await self.api.activities.delete(activity_id)
        self.store.remove_activity(activity_id)
        current = self.store.activities.current_activity
        if current is not None and current.id == activity_id:
            self.store.set_current_activity(None)

    async def complete_activity(self, activity_id: int) -> Activity:
        activity = Activity.from_dict(await self.api.activities.complete(activity_id))
        self._merge(
            activity_id, status=activity.status, completed_at=activity.completed_at
        )
        return activity

    async def upload_gps_points(self, activity_id: int, points: list[dict]) -> dict | None:
        return await self.api.activities.upload_gps_points(activity_id, points)

    async def give_kudos(self, activity_id: int) -> None:
        await self.api.social.give_kudos(activity_id)
        activity = self._find(activity_id)
        if activity is not None and not activity.has_kudos:
            self._merge(activity_id, has_kudos=True, kudos_count=activity.kudos_count + 1)

    async def remove_kudos(self, activity_id: int) -> None:
        await self.api.social.remove_kudos(activity_id)
        activity = self._find(activity_id)
        if activity is not None and activity.has_kudos:
            self._merge(
                activity_id,
                has_kudos=False,
                kudos_count=max(activity.kudos_count - 1, 0),
            )

    async def add_comment(self, activity_id: int, content: str) -> Comment:
        comment = Comment.from_dict(
            await self.api.social.add_comment(activity_id, content), activity_id
        )
        activity = self._find(activity_id)
        if activity is not None:
            self._merge(activity_id, comments_count=activity.comments_count + 1)
        return comment

    async def get_comments(self, activity_id: int) -> list[Comment]:
        payload = await self.api.social.get_comments(activity_id)
        return [Comment.from_dict(c, activity_id) for c in unwrap_items(payload)]

    def _find(self, activity_id: int) -> Activity | None:
        state = self.store.activities
        activity = state.get(activity_id)
        if activity is None and state.current_activity is not None:
            if state.current_activity.id == activity_id:
                activity = state.current_activity
        return activity

    def _merge(self, activity_id: int, **updates) -> None:
        """Apply updates to the feed entry and the detail view, if loaded."""
        self.store.update_activity(activity_id, **updates)
        current = self.store.activities.current_activity
        if current is not None and current.id == activity_id:
            self.store.set_current_activity(replace(current, **updates))
