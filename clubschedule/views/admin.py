"""View-model for the admin panel: login, event form and event list."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, MutableMapping, Optional

from ..client import ScheduleApiClient
from ..errors import ApiError, NetworkError
from ..models import MUTABLE_FIELDS
from .cache import InMemoryListCache, ListCache, read_through

logger = logging.getLogger(__name__)

STORAGE_KEY = "admin_authenticated"
DELETE_PROMPT = "Are you sure you want to delete this schedule item?"


class AdminState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    IDLE = "authenticated-idle"
    SUBMITTING = "submitting"


def empty_form() -> Dict[str, Any]:
    return {
        "title": "",
        "event_type": "",
        "description": "",
        "date": "",
        "start_time": "",
        "end_time": "",
        "day_of_week": "",
        "is_recurring": False,
    }


def _time_input(value: Optional[str]) -> str:
    # time inputs take HH:MM
    return value[:5] if value else ""


def form_from_event(event: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": event.get("title") or "",
        "event_type": event.get("event_type") or "",
        "description": event.get("description") or "",
        "date": event.get("date") or "",
        "start_time": _time_input(event.get("start_time")),
        "end_time": _time_input(event.get("end_time")),
        "day_of_week": event.get("day_of_week") or "",
        "is_recurring": bool(event.get("is_recurring")),
    }


class AdminView:
    """Admin page state machine.

    ``storage`` stands in for browser session storage and outlives a single
    view instance. ``alert`` and ``confirm`` are the blocking dialogs.
    """

    def __init__(
        self,
        client: ScheduleApiClient,
        storage: MutableMapping[str, str],
        cache: Optional[ListCache] = None,
        alert: Optional[Callable[[str], None]] = None,
        confirm: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self.client = client
        self.storage = storage
        self.cache = cache if cache is not None else InMemoryListCache()
        self.alert = alert or (lambda message: logger.info("alert: %s", message))
        self.confirm = confirm or (lambda message: False)

        self.state = AdminState.UNAUTHENTICATED
        self.error: Optional[str] = None
        self.events: List[Dict[str, Any]] = []
        self.form = empty_form()
        self.editing_id: Optional[str] = None

        if self.storage.get(STORAGE_KEY) == "true":
            self.state = AdminState.IDLE
            self.refresh()

    @property
    def is_authenticated(self) -> bool:
        return self.state in (AdminState.IDLE, AdminState.SUBMITTING)

    @property
    def submit_disabled(self) -> bool:
        return self.state != AdminState.IDLE

    # Authentication ---------------------------------------------------------

    def login(self, password: str) -> bool:
        if self.state != AdminState.UNAUTHENTICATED:
            return self.is_authenticated

        self.state = AdminState.AUTHENTICATING
        self.error = None
        try:
            ok = self.client.authenticate(password)
        except ApiError as exc:
            ok = False
            self.error = exc.message
        except NetworkError as exc:
            logger.error("Login request failed: %s", exc)
            ok = False
            self.error = "Authentication failed"

        if not ok:
            self.state = AdminState.UNAUTHENTICATED
            self.error = self.error or "Invalid password"
            return False

        self.storage[STORAGE_KEY] = "true"
        self.state = AdminState.IDLE
        self.refresh()
        return True

    def logout(self) -> None:
        try:
            self.client.logout()
        except (ApiError, NetworkError) as exc:
            logger.warning("Logout request failed: %s", exc)
        self._lock()

    def _lock(self) -> None:
        self.storage.pop(STORAGE_KEY, None)
        self.cache.invalidate()
        self.events = []
        self.reset_form()
        self.state = AdminState.UNAUTHENTICATED

    # List -------------------------------------------------------------------

    def refresh(self) -> List[Dict[str, Any]]:
        try:
            self.events = read_through(self.cache, self.client.list_admin)
        except ApiError as exc:
            if exc.status_code == 401:
                self._lock()
                self.error = "Session expired, please log in again"
            else:
                self.alert(f"Error loading schedule items: {exc.message}")
        except NetworkError as exc:
            self.alert(f"Error: {exc}")
        return self.events

    def _after_mutation(self, message: str) -> None:
        self.alert(message)
        self.cache.invalidate()
        self.refresh()

    # Form -------------------------------------------------------------------

    def set_field(self, name: str, value: Any) -> None:
        if name not in MUTABLE_FIELDS:
            raise KeyError(name)
        self.form[name] = value

    def reset_form(self) -> None:
        self.form = empty_form()
        self.editing_id = None

    def start_edit(self, event: Dict[str, Any]) -> None:
        self.form = form_from_event(event)
        self.editing_id = event["id"]

    def cancel_edit(self) -> None:
        self.reset_form()

    def submit(self) -> bool:
        """Create, or update when an edit target is set."""

        if self.submit_disabled:
            return False

        self.state = AdminState.SUBMITTING
        try:
            if self.editing_id:
                self.client.update(self.editing_id, self.form)
                message = "Schedule item updated!"
            else:
                self.client.create(self.form)
                message = "Schedule item added!"
        except ApiError as exc:
            self.state = AdminState.IDLE
            self.alert(f"Error: {exc.message}")
            if exc.status_code == 401:
                self._lock()
            return False
        except NetworkError as exc:
            self.state = AdminState.IDLE
            self.alert(f"Error: {exc}")
            return False

        self.state = AdminState.IDLE
        self.reset_form()
        self._after_mutation(message)
        return True

    def delete(self, event_id: str) -> bool:
        if self.submit_disabled:
            return False
        if not self.confirm(DELETE_PROMPT):
            return False

        self.state = AdminState.SUBMITTING
        try:
            self.client.delete(event_id)
        except ApiError as exc:
            self.state = AdminState.IDLE
            self.alert(f"Error deleting schedule item: {exc.message}")
            if exc.status_code == 401:
                self._lock()
            return False
        except NetworkError as exc:
            self.state = AdminState.IDLE
            self.alert(f"Error: {exc}")
            return False

        self.state = AdminState.IDLE
        if self.editing_id == event_id:
            self.reset_form()
        self._after_mutation("Schedule item deleted!")
        return True


__all__ = [
    "AdminState",
    "AdminView",
    "DELETE_PROMPT",
    "STORAGE_KEY",
    "empty_form",
    "form_from_event",
]
