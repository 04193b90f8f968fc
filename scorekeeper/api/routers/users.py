"""User registration endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import PasswordHasher, get_session
from ...services.users import register_user
from ..deps import get_hasher
from ..responses import result_response

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", status_code=201)
def create_user(
    body: Dict[str, Any],
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_hasher),
):
    """Register a new user and return its public fields."""

    result = register_user(session, hasher, body)
    return result_response(result, lambda user: user.serialize(), status_code=201)


__all__ = ["router"]
