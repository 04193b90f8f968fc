"""Database model for leaderboard records."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import field_validator
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import isoformat_utc, utcnow


class RecordDraft(SQLModel):
    """Typed view of a record submission, checked on construction."""

    username: str
    score: float
    time: Optional[float] = None
    date: Optional[datetime] = None

    @field_validator("score", "time")
    @classmethod
    def _finite(cls, value: Optional[float]) -> Optional[float]:
        # An unset time is stored as +inf; callers may not send one.
        if value is not None and not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value


class Record(SQLModel, table=True):
    """A single game result; immutable once stored."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(index=True)
    score: float = ORMField(index=True)
    time: float = ORMField(default=math.inf, index=True)
    date: datetime = ORMField(default_factory=utcnow, index=True)

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "score": self.score,
            # JSON has no infinity; an unset time goes out as null.
            "time": self.time if math.isfinite(self.time) else None,
            "date": isoformat_utc(self.date),
        }


__all__ = ["Record", "RecordDraft"]
