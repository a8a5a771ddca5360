from __future__ import annotations

import uuid
from typing import Optional

from faker import Faker

from data.models import UserRecord
from data.users_client import UserApiError


MOCK_PATH = "mock://users"


def seed_users(n: int = 8, seed: int = 7) -> list[UserRecord]:
    fake = Faker()
    fake.seed_instance(seed)
    rows = []
    for _ in range(n):
        rows.append(
            UserRecord(
                id=uuid.UUID(int=fake.random.getrandbits(128), version=4).hex,
                name=fake.name(),
                email=fake.unique.email(),
            )
        )
    return rows


class MockUsersClient:
    """
    In-memory stand-in for the users server, same surface as UsersClient.

    Mirrors the server's answers: unknown ids on update/delete come back as
    404, new ids are hex-encoded UUID4s.
    """

    def __init__(self, users: Optional[list[UserRecord]] = None):
        self._users: dict[str, UserRecord] = {u.id: u for u in (seed_users() if users is None else users)}

    def list_users(self) -> list[UserRecord]:
        return list(self._users.values())

    def create_user(self, name: str, email: str) -> None:
        record = UserRecord(id=uuid.uuid4().hex, name=name, email=email)
        self._users[record.id] = record

    def update_user(self, user_id: str, name: str, email: str) -> None:
        if user_id not in self._users:
            raise UserApiError("PUT", f"{MOCK_PATH}/{user_id}", status=404)
        self._users[user_id] = self._users[user_id].with_fields(name, email)

    def delete_user(self, user_id: str) -> None:
        if self._users.pop(user_id, None) is None:
            raise UserApiError("DELETE", f"{MOCK_PATH}/{user_id}", status=404)

    def describe(self) -> str:
        return MOCK_PATH
