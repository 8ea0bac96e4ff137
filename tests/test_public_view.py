from datetime import date
from unittest.mock import MagicMock

import pytest

from clubschedule.client import ScheduleApiClient
from clubschedule.errors import NetworkError
from clubschedule.views.public import (
    PublicScheduleView,
    event_type_label,
    format_date,
    format_time,
    format_time_range,
    sort_events,
    upcoming_count,
)

EVENTS = [
    {"id": "a", "title": "Ten", "event_type": "tournament", "date": "2024-06-01", "start_time": "10:00"},
    {"id": "b", "title": "Nine", "event_type": "open_gym", "date": "2024-06-01", "start_time": "09:00"},
    {"id": "c", "title": "Undated", "event_type": "open_gym", "date": None, "start_time": "08:00"},
    {"id": "d", "title": "Untimed", "event_type": "tournament", "date": "2024-06-01", "start_time": None},
    {"id": "e", "title": "May", "event_type": "tournament", "date": "2024-05-15", "start_time": "20:00"},
]


def _view(events=EVENTS):
    client = MagicMock(spec=ScheduleApiClient)
    client.list_public.return_value = list(events)
    view = PublicScheduleView(client)
    view.load()
    return view


def test_sort_by_date_then_start_time_with_undated_last():
    ordered = [event["id"] for event in sort_events(EVENTS)]
    assert ordered == ["e", "d", "b", "a", "c"]


def test_same_day_earlier_start_sorts_first():
    ten = {"date": "2024-06-01", "start_time": "10:00"}
    nine = {"date": "2024-06-01", "start_time": "09:00"}
    undated = {"date": None, "start_time": "07:00"}
    assert sort_events([ten, nine, undated]) == [nine, ten, undated]


def test_filter_by_type_and_back_to_all_is_idempotent():
    view = _view()

    view.set_filter("tournament")
    assert {event["id"] for event in view.visible_events()} == {"a", "d", "e"}

    view.set_filter("all")
    assert {event["id"] for event in view.visible_events()} == {e["id"] for e in EVENTS}
    assert len(view.visible_events()) == len(EVENTS)


def test_unknown_filter_is_rejected():
    view = _view()
    with pytest.raises(ValueError):
        view.set_filter("social")
    assert view.filter == "all"


def test_upcoming_count_uses_day_boundary_and_ignores_undated():
    assert upcoming_count(EVENTS, on=date(2024, 6, 1)) == 3
    assert upcoming_count(EVENTS, on=date(2024, 6, 2)) == 0
    assert _view().upcoming_count(on=date(2024, 1, 1)) == 4


def test_load_failure_leaves_empty_list():
    client = MagicMock(spec=ScheduleApiClient)
    client.list_public.side_effect = NetworkError("connection refused")
    view = PublicScheduleView(client)

    assert view.load() == []
    assert view.loading is False


def test_load_fetches_once():
    view = _view()
    view.visible_events()
    view.set_filter("open_gym")
    view.visible_events()
    view.client.list_public.assert_called_once_with()


def test_formatting_helpers():
    assert format_date("2024-06-01") == "Saturday, June 1, 2024"
    assert format_date(None) == ""
    assert format_time("09:05:00") == "9:05 AM"
    assert format_time("00:30") == "12:30 AM"
    assert format_time("18:00") == "6:00 PM"
    assert format_time_range("18:00", "20:30") == "6:00 PM - 8:30 PM"
    assert format_time_range("18:00", None) == "6:00 PM"
    assert event_type_label("open_gym") == "Open Gym"
    assert event_type_label(None) == ""


def test_cards_follow_visible_order():
    recurring = {
        "id": "r",
        "title": "Tuesday Gym",
        "event_type": "open_gym",
        "date": None,
        "start_time": "19:00:00",
        "end_time": "21:00:00",
        "day_of_week": "Tuesday",
        "is_recurring": True,
    }
    view = _view(EVENTS + [recurring])
    view.set_filter("open_gym")

    cards = view.cards()
    assert [card["id"] for card in cards] == ["b", "c", "r"]
    assert cards[-1]["recurring"] == "Every Tuesday"
    assert cards[-1]["time"] == "7:00 PM - 9:00 PM"
    assert cards[0]["type_label"] == "Open Gym"


def test_public_view_against_api(admin_client, api):
    admin_client.post("/admin/schedule", json={"title": "Later", "date": "2030-07-01"})
    admin_client.post("/admin/schedule", json={"title": "TBD"})
    admin_client.post(
        "/admin/schedule",
        json={"title": "Sooner", "date": "2030-06-01", "event_type": "tournament"},
    )

    view = PublicScheduleView(api)
    view.load()

    assert [event["title"] for event in view.visible_events()] == ["Sooner", "Later", "TBD"]
    assert view.upcoming_count(on=date(2030, 6, 15)) == 1
