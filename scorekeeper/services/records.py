"""Leaderboard record creation and ranking queries."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.time import to_utc, utcnow
from ..models import Record, RecordDraft
from .results import InternalFailure, Ok, Result, ValidationFailure

logger = logging.getLogger(__name__)

LEADERBOARD_LIMIT = 30
REQUIRED_FIELDS = ("username", "score")


def create_record(session: Session, payload: Mapping[str, Any]) -> Result[Record]:
    """Store a submitted game result.

    ``time`` defaults to +infinity so untimed runs rank last on the
    best-times board; ``date`` defaults to the submission time.
    """

    for field in REQUIRED_FIELDS:
        if field not in payload:
            logger.info("Rejected record: missing %s", field)
            return ValidationFailure(f"Missing {field} in request body", field)

    try:
        draft = RecordDraft.model_validate(dict(payload))
    except ValidationError as exc:
        error = exc.errors()[0]
        location = str(error["loc"][0])
        logger.info("Rejected record: bad %s", location)
        if error["type"] == "value_error":
            return ValidationFailure("Must be a finite number", location)
        return ValidationFailure("Incorrect field type", location)

    record = Record(
        username=draft.username,
        score=draft.score,
        time=draft.time if draft.time is not None else math.inf,
        date=to_utc(draft.date or utcnow()),
    )
    try:
        session.add(record)
        session.commit()
        session.refresh(record)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to persist record for %r", draft.username)
        return InternalFailure()
    return Ok(record)


def _run(session: Session, statement) -> Result[List[Record]]:
    try:
        return Ok(list(session.exec(statement.limit(LEADERBOARD_LIMIT)).all()))
    except SQLAlchemyError:
        logger.exception("Leaderboard query failed")
        return InternalFailure()


def top_scores(session: Session) -> Result[List[Record]]:
    return _run(session, select(Record).order_by(Record.score.desc()))


def best_times(session: Session) -> Result[List[Record]]:
    """Fastest first; untimed records (stored as +inf) sort last."""

    return _run(session, select(Record).order_by(Record.time.asc()))


def most_recent(session: Session) -> Result[List[Record]]:
    return _run(session, select(Record).order_by(Record.date.desc()))


def user_history(session: Session, username: str) -> Result[List[Record]]:
    return _run(
        session,
        select(Record)
        .where(Record.username == username)
        .order_by(Record.date.desc()),
    )


__all__ = [
    "LEADERBOARD_LIMIT",
    "best_times",
    "create_record",
    "most_recent",
    "top_scores",
    "user_history",
]
