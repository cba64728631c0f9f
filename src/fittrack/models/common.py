"""Helpers shared by the data models."""

from datetime import datetime, timezone


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO-8601 timestamp from the API.

    A trailing ``Z`` is accepted. Naive values are taken to be UTC.
    Returns None for missing values.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_timestamp(value: datetime | None) -> str | None:
    """Serialize a timestamp back to ISO-8601."""
    return value.isoformat() if value else None


def drop_none(data: dict) -> dict:
    """Remove keys whose value is None (unset optional fields)."""
    return {key: value for key, value in data.items() if value is not None}
