"""New-activity form."""

from dataclasses import dataclass

from ..errors import ValidationError
from ..models.activity import ActivityType
from ..models.requests import CreateActivityData

# Types offered when creating an activity, in display order
FORM_ACTIVITY_TYPES = [
    ActivityType.RUN,
    ActivityType.RIDE,
    ActivityType.SWIM,
    ActivityType.WALK,
    ActivityType.HIKE,
    ActivityType.WORKOUT,
]


@dataclass
class ActivityForm:
    title: str = ""
    activity_type: str = ActivityType.RUN.value
    description: str = ""

    def validate(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not self.title.strip():
            errors["title"] = "Title is required"
        if self.activity_type not in {t.value for t in FORM_ACTIVITY_TYPES}:
            errors["activity_type"] = f"Unknown activity type: {self.activity_type}"
        return errors

    def to_payload(self) -> CreateActivityData:
        errors = self.validate()
        if errors:
            raise ValidationError(errors)
        return CreateActivityData(
            title=self.title.strip(),
            activity_type=ActivityType(self.activity_type),
            description=self.description.strip() or None,
        )
