"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter

from ...services.navigation import navigation_tree

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/navigation")
def get_navigation() -> List[Dict[str, Any]]:
    """Site menu entries, dropdown children included."""

    return navigation_tree()


__all__ = ["router"]
