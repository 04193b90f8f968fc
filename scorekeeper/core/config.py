"""Application settings and environment helpers."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


_DURATION_UNITS = {"s": "seconds", "m": "minutes", "h": "hours", "d": "days"}
_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")


def parse_duration(raw: str) -> timedelta:
    """Parse ``"3600"``, ``"15m"``, ``"12h"`` or ``"7d"`` into a timedelta."""

    match = _DURATION_RE.match(raw or "")
    if not match:
        raise ValueError(f"Invalid duration: {raw!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS.get(unit or "s"): int(amount)})


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Token signing --------------------------------------------------------------
JWT_SECRET = _require_env("JWT_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

try:
    JWT_EXPIRY = parse_duration(os.getenv("JWT_EXPIRY", "7d"))
except ValueError as exc:
    raise RuntimeError("JWT_EXPIRY must look like 3600, 30m, 12h or 7d") from exc


# Password hashing -----------------------------------------------------------
BCRYPT_ROUNDS = _env_int("BCRYPT_ROUNDS", 10)


# Persistence ----------------------------------------------------------------
DATABASE_URL = os.getenv(
    "DATABASE_URL", f"sqlite:///{_PROJECT_ROOT / 'data' / 'app.db'}"
)
DB_RESET = _env_bool("DB_RESET", False)


# HTTP -----------------------------------------------------------------------
# CLIENT_ORIGIN can contain a comma-separated list for multi-domain deploys.
_client_origins = _split_csv(os.getenv("CLIENT_ORIGIN"))

_local_dev_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]

ALLOWED_CORS_ORIGINS = _unique([*_client_origins, *_local_dev_origins])


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "BCRYPT_ROUNDS",
    "DATABASE_URL",
    "DB_RESET",
    "JWT_ALGORITHM",
    "JWT_EXPIRY",
    "JWT_SECRET",
    "LOG_LEVEL",
    "parse_duration",
]
