"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .responses import (
    FailureError,
    failure_error_handler,
    request_validation_handler,
    unhandled_error_handler,
)
from .routers import ALL_ROUTERS


def register_api(app: FastAPI) -> None:
    """Attach error handlers and all application routers to the given app."""

    app.add_exception_handler(FailureError, failure_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_api"]
