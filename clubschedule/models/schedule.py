"""Database model and input schema for schedule events."""

from __future__ import annotations

import datetime as dt
import uuid
from enum import Enum
from typing import Any, Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from ..core.time import utcnow


class EventType(str, Enum):
    tournament = "tournament"
    open_gym = "open_gym"


class DayOfWeek(str, Enum):
    Monday = "Monday"
    Tuesday = "Tuesday"
    Wednesday = "Wednesday"
    Thursday = "Thursday"
    Friday = "Friday"
    Saturday = "Saturday"
    Sunday = "Sunday"


MUTABLE_FIELDS = (
    "title",
    "event_type",
    "description",
    "date",
    "start_time",
    "end_time",
    "day_of_week",
    "is_recurring",
)


class ScheduleEventInput(SQLModel):
    """Mutable fields accepted by create and update.

    Blank optional values are coalesced to ``None`` and ``is_recurring``
    to ``False``. Start and end are times of day only.
    """

    title: str
    event_type: Optional[EventType] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    start_time: Optional[dt.time] = None
    end_time: Optional[dt.time] = None
    day_of_week: Optional[DayOfWeek] = None
    is_recurring: bool = False

    @field_validator(
        "event_type",
        "description",
        "date",
        "start_time",
        "end_time",
        "day_of_week",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        return value or None

    @field_validator("is_recurring", mode="before")
    @classmethod
    def _default_false(cls, value: Any) -> Any:
        if value is None or value == "":
            return False
        return value


class ScheduleEvent(SQLModel, table=True):
    """One scheduled tournament or open-gym session."""

    __tablename__ = "schedules"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    title: str
    event_type: Optional[EventType] = Field(default=None, index=True)
    description: Optional[str] = None
    date: Optional[dt.date] = Field(default=None, index=True)
    start_time: Optional[dt.time] = None
    end_time: Optional[dt.time] = None
    day_of_week: Optional[DayOfWeek] = None
    is_recurring: bool = Field(default=False, nullable=False)
    created_at: dt.datetime = Field(default_factory=utcnow, index=True)


__all__ = [
    "DayOfWeek",
    "EventType",
    "MUTABLE_FIELDS",
    "ScheduleEvent",
    "ScheduleEventInput",
]
