"""
Shared Pydantic schemas and field helpers
"""
from datetime import datetime, timezone
from typing import Any
from pydantic import BaseModel, TypeAdapter


class DeleteResponse(BaseModel):
    """Returned by every DELETE endpoint"""
    success: bool = True


_timestamp_adapter = TypeAdapter(datetime)


def parse_calendar_date(value: Any) -> Any:
    """
    Keep only the UTC calendar day of a date or ISO timestamp string.
    "2026-02-25T00:00:00.000Z" and "2026-02-25" both mean Feb 25;
    "2026-02-25T23:30:00-05:00" is Feb 26 in UTC.
    """
    if isinstance(value, str) and "T" in value:
        value = _timestamp_adapter.validate_python(value)
    if isinstance(value, datetime):
        return to_naive_utc(value).date()
    return value


def to_naive_utc(value: datetime) -> datetime:
    """Timestamps are stored as naive UTC"""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def empty_to_none(value: Any) -> Any:
    if value == "":
        return None
    return value
