"""Public schedule listing."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services.schedules import ScheduleStore, schedule_to_dict

router = APIRouter(tags=["schedule"])


@router.get("/schedule")
def list_public_schedule(
    event_type: Optional[str] = None, session: Session = Depends(get_session)
) -> List[Dict[str, Any]]:
    """All schedule items by date, undated items last."""

    events = ScheduleStore(session).list(
        order_field="date", ascending=True, event_type=event_type
    )
    return [schedule_to_dict(event) for event in events]


__all__ = ["router"]
