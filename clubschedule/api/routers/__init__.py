"""Aggregate API routers."""

from fastapi import APIRouter

from .admin import router as admin_router
from .schedule import router as schedule_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    schedule_router,
    admin_router,
)

__all__ = ["ALL_ROUTERS"]
