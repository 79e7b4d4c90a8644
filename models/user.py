"""
models/user.py
--------------
Domain model for user records.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class User:
    """
    Represents a row of the users table.

    Attributes:
        id: Store-assigned primary key (None for new records).
        name: Display name.
        email: Contact address. Not validated by this system.
        created_at: Store-assigned creation timestamp.
    """
    name: str
    email: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "User":
        return cls(
            id=row.get("id"),
            name=row.get("name"),
            email=row.get("email"),
            created_at=row.get("created_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        created = self.created_at
        if isinstance(created, datetime):
            created = created.strftime(TIMESTAMP_FORMAT)
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": created,
        }
