"""Error types shared by the API, the store adapter and the view-models."""

from __future__ import annotations

from typing import Optional


class ScheduleError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ScheduleError):
    """A required field or parameter is missing."""

    status_code = 400


class StoreError(ScheduleError):
    """The underlying store rejected the operation."""

    status_code = 400


class NotFoundError(ScheduleError):
    status_code = 404


class UnauthorizedError(ScheduleError):
    status_code = 401


class ConfigError(ScheduleError):
    """Server misconfiguration. The caller only sees a generic message."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__("Server configuration error")
        self.detail = detail


class ApiError(Exception):
    """Non-2xx response received by the API client."""

    def __init__(self, status_code: int, message: Optional[str]) -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message or f"HTTP {status_code}"


class NetworkError(Exception):
    """The request never produced a response."""


__all__ = [
    "ApiError",
    "ConfigError",
    "NetworkError",
    "NotFoundError",
    "ScheduleError",
    "StoreError",
    "UnauthorizedError",
    "ValidationError",
]
