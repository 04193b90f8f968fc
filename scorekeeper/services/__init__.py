"""Service layer helpers."""

from .auth import PasswordStrategy, TokenStrategy
from .records import (
    LEADERBOARD_LIMIT,
    best_times,
    create_record,
    most_recent,
    top_scores,
    user_history,
)
from .results import AuthFailure, InternalFailure, Ok, Result, ValidationFailure
from .users import find_user, register_user
from .validation import validate_user_payload

__all__ = [
    "AuthFailure",
    "InternalFailure",
    "LEADERBOARD_LIMIT",
    "Ok",
    "PasswordStrategy",
    "Result",
    "TokenStrategy",
    "ValidationFailure",
    "best_times",
    "create_record",
    "find_user",
    "most_recent",
    "register_user",
    "top_scores",
    "user_history",
    "validate_user_payload",
]
