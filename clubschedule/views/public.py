"""View-model for the public schedule page."""

from __future__ import annotations

import logging
from datetime import date, time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..client import ScheduleApiClient
from ..core.time import today as current_day
from ..errors import ApiError, NetworkError
from ..models import EventType

logger = logging.getLogger(__name__)

ALL = "all"
FILTER_CHOICES = (ALL,) + tuple(member.value for member in EventType)

EVENT_TYPE_LABELS = {
    EventType.tournament.value: "Tournament",
    EventType.open_gym.value: "Open Gym",
}


def _parse_date(raw: Optional[str]) -> Optional[date]:
    if not raw:
        return None
    try:
        return date.fromisoformat(str(raw)[:10])
    except ValueError:
        return None


def matches_filter(event: Dict[str, Any], selection: str) -> bool:
    return selection == ALL or event.get("event_type") == selection


def sort_key(event: Dict[str, Any]) -> Tuple[date, str]:
    """Date ascending with undated events last, then start time as text."""

    return (_parse_date(event.get("date")) or date.max, event.get("start_time") or "")


def sort_events(events: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(events, key=sort_key)


def upcoming_count(events: Iterable[Dict[str, Any]], on: Optional[date] = None) -> int:
    """Count dated events on or after ``on`` (today by default)."""

    boundary = on or current_day()
    count = 0
    for event in events:
        event_date = _parse_date(event.get("date"))
        if event_date is not None and event_date >= boundary:
            count += 1
    return count


def format_date(raw: Optional[str]) -> str:
    value = _parse_date(raw)
    if value is None:
        return ""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_time(raw: Optional[str]) -> str:
    if not raw:
        return ""
    try:
        value = time.fromisoformat(str(raw))
    except ValueError:
        return str(raw)
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_time_range(start: Optional[str], end: Optional[str]) -> str:
    start_out, end_out = format_time(start), format_time(end)
    if start_out and end_out:
        return f"{start_out} - {end_out}"
    return start_out or end_out


def event_type_label(event_type: Optional[str]) -> str:
    if not event_type:
        return ""
    return EVENT_TYPE_LABELS.get(event_type, event_type.replace("_", " ").title())


class PublicScheduleView:
    """Loads every event once; filtering and sorting happen in memory."""

    def __init__(self, client: ScheduleApiClient) -> None:
        self.client = client
        self.events: List[Dict[str, Any]] = []
        self.filter = ALL
        self.loading = True

    def load(self) -> List[Dict[str, Any]]:
        try:
            self.events = list(self.client.list_public())
        except (ApiError, NetworkError) as exc:
            logger.error("Error fetching schedules: %s", exc)
            self.events = []
        finally:
            self.loading = False
        return self.events

    def set_filter(self, selection: str) -> None:
        if selection not in FILTER_CHOICES:
            raise ValueError(f"Unknown filter: {selection}")
        self.filter = selection

    def visible_events(self) -> List[Dict[str, Any]]:
        return sort_events(e for e in self.events if matches_filter(e, self.filter))

    def upcoming_count(self, on: Optional[date] = None) -> int:
        return upcoming_count(self.events, on)

    def cards(self) -> List[Dict[str, Any]]:
        """Display-ready rows for the visible events."""

        return [
            {
                "id": event["id"],
                "title": event["title"],
                "type_label": event_type_label(event.get("event_type")),
                "description": event.get("description") or "",
                "date": format_date(event.get("date")),
                "time": format_time_range(event.get("start_time"), event.get("end_time")),
                "recurring": (
                    f"Every {event['day_of_week']}"
                    if event.get("is_recurring") and event.get("day_of_week")
                    else ""
                ),
            }
            for event in self.visible_events()
        ]


__all__ = [
    "ALL",
    "FILTER_CHOICES",
    "PublicScheduleView",
    "event_type_label",
    "format_date",
    "format_time",
    "format_time_range",
    "matches_filter",
    "sort_events",
    "sort_key",
    "upcoming_count",
]
