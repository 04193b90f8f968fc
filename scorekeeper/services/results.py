"""Tagged outcomes returned by the service layer.

Services never raise for expected failures; they return one of the
variants below and the HTTP layer decides the status code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class ValidationFailure:
    message: str
    location: str
    reason: str = "ValidationError"


@dataclass(frozen=True)
class AuthFailure:
    reason: str
    message: str


@dataclass(frozen=True)
class InternalFailure:
    message: str = "Internal server error"
    reason: str = "InternalError"


Failure = Union[ValidationFailure, AuthFailure, InternalFailure]
Result = Union[Ok[T], ValidationFailure, AuthFailure, InternalFailure]


__all__ = [
    "AuthFailure",
    "Failure",
    "InternalFailure",
    "Ok",
    "Result",
    "ValidationFailure",
]
