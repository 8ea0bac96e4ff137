"""Store adapter over the ``schedules`` table."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..errors import NotFoundError, StoreError, ValidationError
from ..models import EventType, ScheduleEvent, ScheduleEventInput

logger = logging.getLogger(__name__)

ORDER_FIELDS = ("created_at", "date")


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _isoformat(value: Any) -> Optional[str]:
    return value.isoformat() if value is not None else None


def schedule_to_dict(event: ScheduleEvent) -> Dict[str, Any]:
    """Serialise a schedule event to an API-friendly dict."""

    created_at = event.created_at
    created_at_out = None
    if created_at is not None:
        created_at_out = created_at.isoformat()
        if not created_at.tzinfo:
            created_at_out += "Z"
    return {
        "id": str(event.id),
        "title": event.title,
        "event_type": _enum_value(event.event_type),
        "description": event.description,
        "date": _isoformat(event.date),
        "start_time": _isoformat(event.start_time),
        "end_time": _isoformat(event.end_time),
        "day_of_week": _enum_value(event.day_of_week),
        "is_recurring": bool(event.is_recurring),
        "created_at": created_at_out,
    }


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid schedule payload"


def normalize_fields(fields: Mapping[str, Any]) -> ScheduleEventInput:
    """Validate a request body into the full set of mutable fields."""

    title = fields.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")
    try:
        return ScheduleEventInput.model_validate({**fields, "title": title.strip()})
    except PydanticValidationError as exc:
        raise StoreError(_describe(exc)) from exc


def parse_id(raw: Any) -> uuid.UUID:
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError) as exc:
        raise StoreError(f'invalid input syntax for type uuid: "{raw}"') from exc


class ScheduleStore:
    """Single-call select/insert/update/delete over schedule rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        order_field: str = "created_at",
        ascending: bool = False,
        event_type: Optional[str] = None,
    ) -> List[ScheduleEvent]:
        if order_field not in ORDER_FIELDS:
            raise StoreError(f"Unsupported order field: {order_field}")

        statement = select(ScheduleEvent)
        if event_type:
            try:
                wanted = EventType(event_type)
            except ValueError as exc:
                raise StoreError(f"Unknown event type: {event_type}") from exc
            statement = statement.where(ScheduleEvent.event_type == wanted)

        if order_field == "date":
            # Undated rows last, then start time with missing values first.
            statement = statement.order_by(
                ScheduleEvent.date.is_(None),
                ScheduleEvent.date.asc() if ascending else ScheduleEvent.date.desc(),
                ScheduleEvent.start_time.is_not(None),
                ScheduleEvent.start_time.asc(),
            )
        else:
            statement = statement.order_by(
                ScheduleEvent.created_at.asc()
                if ascending
                else ScheduleEvent.created_at.desc()
            )

        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise self._store_error("list", exc) from exc

    def get(self, event_id: Any) -> Optional[ScheduleEvent]:
        return self.session.get(ScheduleEvent, parse_id(event_id))

    def insert(self, fields: Mapping[str, Any]) -> ScheduleEvent:
        payload = normalize_fields(fields)
        event = ScheduleEvent(**payload.model_dump())
        try:
            self.session.add(event)
            self.session.commit()
            self.session.refresh(event)
        except SQLAlchemyError as exc:
            raise self._store_error("insert", exc) from exc
        logger.info("Created schedule item %s", event.id)
        return event

    def update_by_id(self, event_id: Any, fields: Mapping[str, Any]) -> ScheduleEvent:
        """Overwrite every mutable field of an existing row."""

        payload = normalize_fields(fields)
        event = self.get(event_id)
        if event is None:
            raise NotFoundError("Schedule item not found")

        for name, value in payload.model_dump().items():
            setattr(event, name, value)
        try:
            self.session.add(event)
            self.session.commit()
            self.session.refresh(event)
        except SQLAlchemyError as exc:
            raise self._store_error("update", exc) from exc
        logger.info("Updated schedule item %s", event.id)
        return event

    def delete_by_id(self, event_id: Any) -> None:
        event = self.get(event_id)
        if event is None:
            return
        try:
            self.session.delete(event)
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("delete", exc) from exc
        logger.info("Deleted schedule item %s", event.id)

    def _store_error(self, operation: str, exc: SQLAlchemyError) -> StoreError:
        self.session.rollback()
        logger.error("Store error during %s: %s", operation, exc)
        return StoreError(str(getattr(exc, "orig", None) or exc))


__all__ = [
    "ORDER_FIELDS",
    "ScheduleStore",
    "normalize_fields",
    "parse_id",
    "schedule_to_dict",
]
