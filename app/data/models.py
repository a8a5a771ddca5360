from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RowMode(str, Enum):
    """Per-record UI state on the Users page."""

    VIEWING = "viewing"
    EDITING = "editing"


@dataclass(frozen=True)
class UserRecord:
    id: str
    name: str
    email: str

    @classmethod
    def from_json(cls, data: Any) -> "UserRecord":
        """
        Build a record from the server shape {id, name, email}.
        Raises ValueError for anything else.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a user object, got {type(data).__name__}")
        missing = [k for k in ("id", "name", "email") if k not in data]
        if missing:
            raise ValueError(f"user object missing {', '.join(missing)}")
        return cls(id=str(data["id"]), name=str(data["name"]), email=str(data["email"]))

    def with_fields(self, name: str, email: str) -> "UserRecord":
        return UserRecord(id=self.id, name=name, email=email)


def parse_user_list(data: Any) -> list[UserRecord]:
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array of users, got {type(data).__name__}")
    return [UserRecord.from_json(item) for item in data]
