"""Activity feed state slice and its reducers."""

from dataclasses import dataclass, replace

from ..models.activity import Activity


@dataclass(frozen=True)
class ActivityState:
    activities: tuple[Activity, ...] = ()
    current_activity: Activity | None = None
    is_loading: bool = False

    def get(self, activity_id: int) -> Activity | None:
        for activity in self.activities:
            if activity.id == activity_id:
                return activity
        return None


def set_activities(state: ActivityState, activities: list[Activity]) -> ActivityState:
    return replace(state, activities=tuple(activities))


def add_activity(state: ActivityState, activity: Activity) -> ActivityState:
    """Newest first."""
    return replace(state, activities=(activity, *state.activities))


def set_current_activity(state: ActivityState, activity: Activity | None) -> ActivityState:
    return replace(state, current_activity=activity)


def update_activity(state: ActivityState, activity_id: int, **updates) -> ActivityState:
    return replace(
        state,
        activities=tuple(
            replace(a, **updates) if a.id == activity_id else a
            for a in state.activities
        ),
    )


def remove_activity(state: ActivityState, activity_id: int) -> ActivityState:
    return replace(
        state,
        activities=tuple(a for a in state.activities if a.id != activity_id),
    )


def set_loading(state: ActivityState, value: bool) -> ActivityState:
    return replace(state, is_loading=value)
