"""Request-scoped dependencies: hasher, token issuer and auth strategies."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends, Header
from sqlmodel import Session

from ..core import (
    BCRYPT_ROUNDS,
    JWT_ALGORITHM,
    JWT_EXPIRY,
    JWT_SECRET,
    PasswordHasher,
    TokenIssuer,
    get_session,
)
from ..services.auth import PasswordStrategy, TokenStrategy
from ..services.results import Ok
from .responses import BEARER_CHALLENGE, FailureError


@lru_cache
def get_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=BCRYPT_ROUNDS)


@lru_cache
def get_issuer() -> TokenIssuer:
    return TokenIssuer(JWT_SECRET, JWT_EXPIRY, algorithm=JWT_ALGORITHM)


def get_password_strategy(
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_hasher),
) -> PasswordStrategy:
    return PasswordStrategy(session, hasher)


def get_token_strategy(issuer: TokenIssuer = Depends(get_issuer)) -> TokenStrategy:
    return TokenStrategy(issuer)


def require_user(
    authorization: Optional[str] = Header(None),
    strategy: TokenStrategy = Depends(get_token_strategy),
) -> Dict[str, Any]:
    """Resolve the bearer token to its user claim or answer 401."""

    result = strategy.authenticate(authorization)
    if not isinstance(result, Ok):
        raise FailureError(result, headers=BEARER_CHALLENGE)
    return result.value


__all__ = [
    "get_hasher",
    "get_issuer",
    "get_password_strategy",
    "get_token_strategy",
    "require_user",
]
