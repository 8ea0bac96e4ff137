"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASSWORD,
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    SECRET_KEY,
)
from .database import engine, get_session
from .time import today, utcnow

__all__ = [
    "ADMIN_PASSWORD",
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "SECRET_KEY",
    "engine",
    "get_session",
    "today",
    "utcnow",
]
