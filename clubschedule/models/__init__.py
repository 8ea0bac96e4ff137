"""Database model exports."""

from .schedule import (
    MUTABLE_FIELDS,
    DayOfWeek,
    EventType,
    ScheduleEvent,
    ScheduleEventInput,
)

__all__ = [
    "DayOfWeek",
    "EventType",
    "MUTABLE_FIELDS",
    "ScheduleEvent",
    "ScheduleEventInput",
]
