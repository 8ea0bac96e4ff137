"""Time helpers shared by models and views."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def today() -> date:
    """Return the current local calendar day."""
    return date.today()


__all__ = ["today", "utcnow"]
