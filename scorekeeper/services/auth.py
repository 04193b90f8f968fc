"""Authentication strategies.

Each strategy is a plain object built for the request that needs it and
exposes ``authenticate(...)`` returning ``Ok(identity)`` or an
``AuthFailure``. Store errors are not caught here and propagate.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import jwt
from sqlmodel import Session

from ..core.security import PasswordHasher, TokenIssuer
from ..models import User
from .results import AuthFailure, Ok, Result
from .users import find_user

logger = logging.getLogger(__name__)

# Deliberately identical for unknown users and wrong passwords.
LOGIN_FAILED = AuthFailure("LoginError", "Incorrect username or password")
MISSING_CREDENTIALS = AuthFailure("BadRequest", "Missing credentials")
MISSING_TOKEN = AuthFailure("AuthenticationError", "Missing or invalid Authorization header")
TOKEN_EXPIRED = AuthFailure("AuthenticationError", "Token expired")
TOKEN_INVALID = AuthFailure("AuthenticationError", "Invalid token")


class PasswordStrategy:
    """Username/password login against the credential store."""

    def __init__(self, session: Session, hasher: PasswordHasher) -> None:
        self.session = session
        self.hasher = hasher

    def authenticate(self, username: Any, password: Any) -> Result[User]:
        if not isinstance(username, str) or not isinstance(password, str):
            return MISSING_CREDENTIALS
        if not username or not password:
            return MISSING_CREDENTIALS

        user = find_user(self.session, username)
        if user is None:
            logger.info("Login failed for %r: unknown user", username)
            return LOGIN_FAILED
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed for %r: bad password", username)
            return LOGIN_FAILED
        return Ok(user)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header."""

    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class TokenStrategy:
    """Bearer-token authentication yielding the embedded user claim."""

    def __init__(self, issuer: TokenIssuer) -> None:
        self.issuer = issuer

    def authenticate(self, authorization: Optional[str]) -> Result[Dict[str, Any]]:
        token = extract_bearer_token(authorization)
        if token is None:
            return MISSING_TOKEN

        try:
            claims = self.issuer.verify(token)
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return TOKEN_EXPIRED
        except jwt.InvalidTokenError as exc:
            logger.info("Rejected invalid token: %s", exc)
            return TOKEN_INVALID

        user_claim = claims.get("user")
        if not isinstance(user_claim, dict) or user_claim.get("username") != claims["sub"]:
            logger.info("Rejected token with inconsistent user claim")
            return TOKEN_INVALID
        return Ok(user_claim)


__all__ = [
    "LOGIN_FAILED",
    "MISSING_CREDENTIALS",
    "MISSING_TOKEN",
    "PasswordStrategy",
    "TOKEN_EXPIRED",
    "TOKEN_INVALID",
    "TokenStrategy",
    "extract_bearer_token",
]
