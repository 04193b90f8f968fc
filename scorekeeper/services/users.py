"""User registration and lookup."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from ..core.security import PasswordHasher
from ..models import User
from .results import InternalFailure, Ok, Result, ValidationFailure
from .validation import validate_user_payload

logger = logging.getLogger(__name__)

USERNAME_TAKEN = ValidationFailure("Username already taken", "username")


def find_user(session: Session, username: str) -> Optional[User]:
    return session.exec(select(User).where(User.username == username)).first()


def register_user(
    session: Session, hasher: PasswordHasher, payload: Mapping[str, Any]
) -> Result[User]:
    """Validate, hash and persist a new user.

    The lookup before insert is not atomic; the unique index on
    ``username`` rejects the loser of a concurrent registration.
    """

    error = validate_user_payload(payload)
    if error is not None:
        logger.info("Rejected registration: %s (%s)", error.message, error.location)
        return error

    username = payload["username"]
    if find_user(session, username) is not None:
        logger.info("Rejected registration: username %r taken", username)
        return USERNAME_TAKEN

    user = User(
        username=username,
        password_hash=hasher.hash(payload["password"]),
        first_name=(payload.get("firstName") or "").strip(),
        last_name=(payload.get("lastName") or "").strip(),
    )
    try:
        session.add(user)
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.info("Rejected registration: username %r taken on insert", username)
        return USERNAME_TAKEN
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to persist user %r", username)
        return InternalFailure()

    session.refresh(user)
    logger.info("Registered user %r", username)
    return Ok(user)


__all__ = ["USERNAME_TAKEN", "find_user", "register_user"]
