"""Password hashing and signed auth tokens."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict

import bcrypt
import jwt

from .time import utcnow

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def _encode_password(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """One-way salted password hashing backed by bcrypt."""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode_password(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_encode_password(plaintext), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash.
            return False


class TokenIssuer:
    """Issue and verify JWTs that embed a serialised user claim.

    Tokens carry ``user`` (the serialised user), ``sub`` (its username),
    ``iat`` and ``exp``. Verification rejects expired, tampered or
    malformed tokens by raising :class:`jwt.InvalidTokenError` subclasses.
    """

    def __init__(
        self, secret: str, expiry: timedelta, algorithm: str = "HS256"
    ) -> None:
        self.secret = secret
        self.expiry = expiry
        self.algorithm = algorithm

    def issue(self, user_claim: Dict[str, Any]) -> str:
        issued_at = utcnow()
        payload = {
            "user": user_claim,
            "sub": user_claim["username"],
            "iat": issued_at,
            "exp": issued_at + self.expiry,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        return jwt.decode(
            token,
            self.secret,
            algorithms=[self.algorithm],
            options={"require": ["exp", "sub"]},
        )


__all__ = ["BCRYPT_MAX_BYTES", "PasswordHasher", "TokenIssuer"]
