"""Login and token refresh endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...core import TokenIssuer
from ...services.auth import PasswordStrategy
from ..deps import get_issuer, get_password_strategy, require_user
from ..responses import result_response

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(
    body: Dict[str, Any],
    strategy: PasswordStrategy = Depends(get_password_strategy),
    issuer: TokenIssuer = Depends(get_issuer),
):
    """Exchange a username and password for a signed token."""

    result = strategy.authenticate(body.get("username"), body.get("password"))
    return result_response(
        result, lambda user: {"authToken": issuer.issue(user.serialize())}
    )


@router.post("/refresh")
def refresh(
    user: Dict[str, Any] = Depends(require_user),
    issuer: TokenIssuer = Depends(get_issuer),
) -> Dict[str, str]:
    """Exchange a valid token for a new one with a fresh expiry."""

    return {"authToken": issuer.issue(user)}


__all__ = ["router"]
