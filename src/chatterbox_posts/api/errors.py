"""Exception handlers that turn service errors into HTTP responses."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chatterbox_posts.core.exceptions import (
    PostServiceError,
    RouteNotFoundError,
    ValidationError,
)
from chatterbox_posts.db.time import isoformat_utc

INVALID_ENDPOINT_MESSAGE = "The requested endpoint is not valid. Please check the URL."


def invalid_endpoint_body(message: str = INVALID_ENDPOINT_MESSAGE) -> dict[str, Any]:
    """Return the structured body answered for unrouted post paths."""
    return {
        "timestamp": isoformat_utc(),
        "status": RouteNotFoundError.status_code,
        "error": "Invalid Endpoint",
        "message": message,
    }


async def handle_route_not_found(request: Request, exc: RouteNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=invalid_endpoint_body(exc.message),
    )


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "errors": exc.errors},
    )


async def handle_service_error(request: Request, exc: PostServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the post service exception handlers to ``app``."""
    app.add_exception_handler(RouteNotFoundError, handle_route_not_found)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(PostServiceError, handle_service_error)
