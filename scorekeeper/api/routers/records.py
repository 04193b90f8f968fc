"""Leaderboard record endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...models import Record
from ...services import records as record_service
from ..deps import require_user
from ..responses import result_response

router = APIRouter(prefix="/api/records", tags=["records"])


def _render_list(records: List[Record]) -> List[Dict[str, Any]]:
    return [record.serialize() for record in records]


@router.post("", status_code=201, dependencies=[Depends(require_user)])
def submit_record(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Add a game result to the leaderboard."""

    result = record_service.create_record(session, body)
    return result_response(
        result, Record.serialize, status_code=201, validation_status=400
    )


@router.get("/best")
def get_best_scores(session: Session = Depends(get_session)):
    """Highest scores first."""

    return result_response(record_service.top_scores(session), _render_list)


@router.get("/times")
def get_best_times(session: Session = Depends(get_session)):
    """Fastest times first; untimed records last."""

    return result_response(record_service.best_times(session), _render_list)


@router.get("/latest")
def get_latest(session: Session = Depends(get_session)):
    """Most recently played records first."""

    return result_response(record_service.most_recent(session), _render_list)


@router.get("/profile/{username}")
@router.get("/date/{username}", include_in_schema=False)
def get_user_history(username: str, session: Session = Depends(get_session)):
    """A single player's records, newest first."""

    return result_response(
        record_service.user_history(session, username), _render_list
    )


__all__ = ["router"]
