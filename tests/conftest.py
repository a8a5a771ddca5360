from __future__ import annotations

from typing import Any, Optional

import pytest

from config import AppConfig
from data.models import UserRecord
from data.users_client import UserApiError


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, raw_text: Optional[str] = None):
        self.status_code = status_code
        self._body = body
        self._raw_text = raw_text

    def json(self) -> Any:
        if self._raw_text is not None:
            raise ValueError(f"not json: {self._raw_text!r}")
        return self._body


class FakeSession:
    """Stands in for requests.Session; replays queued responses in order."""

    def __init__(self, *responses: Any):
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self._responses = list(responses)

    def queue(self, *responses: Any) -> None:
        self._responses.extend(responses)

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        nxt = self._responses.pop(0) if self._responses else FakeResponse(200, [])
        if isinstance(nxt, BaseException):
            raise nxt
        return nxt


class RecordingApi:
    """In-process UsersApi double that records every call."""

    def __init__(self, users: Optional[list[UserRecord]] = None):
        self.users = list(users or [])
        self.calls: list[tuple] = []
        self.fail: set[str] = set()

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail:
            raise UserApiError(op.upper(), "/users", status=500)

    def list_users(self) -> list[UserRecord]:
        self.calls.append(("list",))
        self._maybe_fail("list")
        return list(self.users)

    def create_user(self, name: str, email: str) -> None:
        self.calls.append(("create", {"name": name, "email": email}))
        self._maybe_fail("create")
        self.users.append(UserRecord(id=f"id-{len(self.users) + 1}", name=name, email=email))

    def update_user(self, user_id: str, name: str, email: str) -> None:
        self.calls.append(("update", user_id, {"name": name, "email": email}))
        self._maybe_fail("update")
        self.users = [u.with_fields(name, email) if u.id == user_id else u for u in self.users]

    def delete_user(self, user_id: str) -> None:
        self.calls.append(("delete", user_id))
        self._maybe_fail("delete")
        self.users = [u for u in self.users if u.id != user_id]

    def describe(self) -> str:
        return "recording://users"

    def count(self, op: str) -> int:
        return sum(1 for c in self.calls if c[0] == op)


@pytest.fixture
def cfg() -> AppConfig:
    return AppConfig(
        api_base_url="http://users.test:8080",
        users_path="/users",
        request_timeout=5.0,
        default_use_mock=False,
        refresh_after_update=False,
        log_level="INFO",
    )


@pytest.fixture
def sample_users() -> list[UserRecord]:
    return [
        UserRecord(id="a1", name="Ada Lovelace", email="ada@example.com"),
        UserRecord(id="b2", name="Grace Hopper", email="grace@navy.mil"),
        UserRecord(id="c3", name="Alan Turing", email="alan@example.com"),
    ]


@pytest.fixture
def api(sample_users) -> RecordingApi:
    return RecordingApi(sample_users)
