"""Translate service results into HTTP responses."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..services.results import (
    AuthFailure,
    Failure,
    InternalFailure,
    Ok,
    Result,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def failure_status(failure: Failure, validation_status: int = 422) -> int:
    if isinstance(failure, ValidationFailure):
        return validation_status
    if isinstance(failure, AuthFailure):
        return 400 if failure.reason == "BadRequest" else 401
    return 500


def failure_body(failure: Failure, status_code: int) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "code": status_code,
        "reason": failure.reason,
        "message": failure.message,
    }
    if isinstance(failure, ValidationFailure):
        body["location"] = failure.location
    return body


def failure_response(
    failure: Failure,
    *,
    validation_status: int = 422,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    status_code = failure_status(failure, validation_status)
    return JSONResponse(
        failure_body(failure, status_code), status_code=status_code, headers=headers
    )


def result_response(
    result: Result[Any],
    render: Callable[[Any], Any],
    *,
    status_code: int = 200,
    validation_status: int = 422,
) -> JSONResponse:
    """Render ``Ok`` values with ``render``; map failures to error bodies."""

    if isinstance(result, Ok):
        return JSONResponse(render(result.value), status_code=status_code)
    return failure_response(result, validation_status=validation_status)


class FailureError(Exception):
    """Aborts a request from inside a dependency with a failure body."""

    def __init__(
        self, failure: Failure, headers: Optional[Dict[str, str]] = None
    ) -> None:
        super().__init__(failure.message)
        self.failure = failure
        self.headers = headers


async def failure_error_handler(request: Request, exc: FailureError) -> JSONResponse:
    return failure_response(exc.failure, headers=exc.headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies in the same shape as other failures."""

    error = exc.errors()[0]
    location = str(error["loc"][-1]) if error.get("loc") else "body"
    return failure_response(ValidationFailure(error["msg"], location))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return failure_response(InternalFailure())


__all__ = [
    "BEARER_CHALLENGE",
    "FailureError",
    "failure_body",
    "failure_error_handler",
    "failure_response",
    "failure_status",
    "request_validation_handler",
    "result_response",
    "unhandled_error_handler",
]
