"""Admin authentication and schedule management endpoints."""

from __future__ import annotations

import logging
import secrets
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request
from sqlmodel import Session

from ...core import ADMIN_PASSWORD, get_session
from ...errors import ConfigError, UnauthorizedError, ValidationError
from ...services.schedules import ScheduleStore, schedule_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

SESSION_KEY = "admin"


def require_admin(request: Request) -> bool:
    """Reject admin requests that lack the signed session marker."""

    if not request.session.get(SESSION_KEY):
        raise UnauthorizedError("Unauthorized")
    return True


def _require_id(id: Optional[str]) -> str:
    if not id:
        raise ValidationError("ID parameter is required")
    return id


def _require_object(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


@router.post("/auth")
def admin_auth(request: Request, body: Any = Body(None)):
    """Check the submitted password against ADMIN_PASSWORD."""

    if not ADMIN_PASSWORD:
        raise ConfigError("ADMIN_PASSWORD environment variable not set")

    password = _require_object(body).get("password")
    if not isinstance(password, str) or not secrets.compare_digest(
        password.encode(), ADMIN_PASSWORD.encode()
    ):
        request.session.pop(SESSION_KEY, None)
        raise UnauthorizedError("Invalid password")

    request.session[SESSION_KEY] = True
    logger.info("Admin session opened")
    return {"success": True}


@router.post("/logout")
def admin_logout(request: Request):
    request.session.clear()
    return {"success": True}


@router.get("/session")
def admin_session(request: Request):
    return {"authenticated": bool(request.session.get(SESSION_KEY))}


@router.get("/schedule", dependencies=[Depends(require_admin)])
def list_schedule(session: Session = Depends(get_session)):
    """All schedule items, newest first."""

    events = ScheduleStore(session).list(order_field="created_at", ascending=False)
    return {"data": [schedule_to_dict(event) for event in events]}


@router.post("/schedule", dependencies=[Depends(require_admin)])
def create_schedule(body: Any = Body(None), session: Session = Depends(get_session)):
    event = ScheduleStore(session).insert(_require_object(body))
    return {"data": [schedule_to_dict(event)]}


@router.put("/schedule", dependencies=[Depends(require_admin)])
def update_schedule(
    id: Optional[str] = None,
    body: Any = Body(None),
    session: Session = Depends(get_session),
):
    """Replace every mutable field of the item named by ``id``."""

    event_id = _require_id(id)
    event = ScheduleStore(session).update_by_id(event_id, _require_object(body))
    return {"data": [schedule_to_dict(event)]}


@router.delete("/schedule", dependencies=[Depends(require_admin)])
def delete_schedule(id: Optional[str] = None, session: Session = Depends(get_session)):
    ScheduleStore(session).delete_by_id(_require_id(id))
    return {"message": "Schedule item deleted successfully"}


__all__ = ["SESSION_KEY", "require_admin", "router"]
