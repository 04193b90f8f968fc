"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    BCRYPT_ROUNDS,
    DATABASE_URL,
    DB_RESET,
    JWT_ALGORITHM,
    JWT_EXPIRY,
    JWT_SECRET,
    LOG_LEVEL,
)
from .database import engine, get_session
from .security import PasswordHasher, TokenIssuer
from .time import isoformat_utc, to_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "BCRYPT_ROUNDS",
    "DATABASE_URL",
    "DB_RESET",
    "JWT_ALGORITHM",
    "JWT_EXPIRY",
    "JWT_SECRET",
    "LOG_LEVEL",
    "PasswordHasher",
    "TokenIssuer",
    "engine",
    "get_session",
    "isoformat_utc",
    "to_utc",
    "utcnow",
]
