"""Database model for registered users."""

from __future__ import annotations

from typing import Dict, Optional

from sqlmodel import Field as ORMField, SQLModel


class User(SQLModel, table=True):
    """Registered player with a bcrypt password hash."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(index=True, unique=True)
    password_hash: str
    first_name: str = ""
    last_name: str = ""

    def serialize(self) -> Dict[str, str]:
        """Public representation; the password hash is never included."""

        return {
            "username": self.username,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }


__all__ = ["User"]
