"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import ConfigError, ScheduleError
from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


async def schedule_error_handler(request: Request, exc: ScheduleError) -> JSONResponse:
    """Log, then render the error as ``{"error": message}``."""

    if isinstance(exc, ConfigError):
        logger.error("%s %s: %s", request.method, request.url.path, exc.detail)
    else:
        logger.warning(
            "%s %s -> %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed query or body, reported like any other 400."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(parts) or "Invalid request"
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return JSONResponse({"error": message}, status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("API error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and error handlers to the given app."""

    app.add_exception_handler(ScheduleError, schedule_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    # Runs in ServerErrorMiddleware, outside CORSMiddleware: cross-origin
    # callers get the 500 without CORS headers.
    app.add_exception_handler(Exception, unhandled_error_handler)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = [
    "register_routes",
    "request_validation_handler",
    "schedule_error_handler",
    "unhandled_error_handler",
]
