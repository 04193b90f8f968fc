"""Database model exports."""

from .record import Record, RecordDraft
from .user import User

__all__ = [
    "Record",
    "RecordDraft",
    "User",
]
