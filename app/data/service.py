from __future__ import annotations

import logging
from typing import Optional, Protocol

from config import AppConfig
from data.mock_data import MockUsersClient
from data.models import RowMode, UserRecord
from data.users_client import UserApiError, UsersClient

logger = logging.getLogger(__name__)

LIST_ERROR_MESSAGE = "Error loading users."
DELETE_PROMPT = "Are you sure you want to delete this user?"


class UsersApi(Protocol):
    def list_users(self) -> list[UserRecord]: ...
    def create_user(self, name: str, email: str) -> None: ...
    def update_user(self, user_id: str, name: str, email: str) -> None: ...
    def delete_user(self, user_id: str) -> None: ...
    def describe(self) -> str: ...


def get_users_client(cfg: AppConfig, use_mock: bool) -> UsersApi:
    if use_mock:
        return MockUsersClient()
    return UsersClient(cfg)


class UserDirectory:
    """
    View-model behind the Users page.

    Holds the records from the last successful fetch plus per-row UI state.
    Every operation catches UserApiError at its boundary, logs it and returns
    False; nothing is rethrown to the page.
    """

    def __init__(self, api: UsersApi, refresh_after_update: bool = False):
        self.api = api
        self.refresh_after_update = refresh_after_update
        self.records: list[UserRecord] = []
        self.error: Optional[str] = None
        self.modes: dict[str, RowMode] = {}
        # Text typed into a row in edit mode, kept here so it survives reruns
        # where the row's inputs are not on screen.
        self.drafts: dict[str, tuple[str, str]] = {}
        self.pending_delete: Optional[str] = None
        self.loaded = False

    # --- queries ---

    def mode(self, user_id: str) -> RowMode:
        return self.modes.get(user_id, RowMode.VIEWING)

    def get(self, user_id: str) -> Optional[UserRecord]:
        for r in self.records:
            if r.id == user_id:
                return r
        return None

    def draft(self, user_id: str) -> Optional[tuple[str, str]]:
        return self.drafts.get(user_id)

    def set_draft(self, user_id: str, name: Optional[str] = None, email: Optional[str] = None) -> None:
        current = self.drafts.get(user_id)
        if current is None:
            return
        self.drafts[user_id] = (current[0] if name is None else name, current[1] if email is None else email)

    # --- operations ---

    def refresh(self) -> bool:
        self.loaded = True
        try:
            users = self.api.list_users()
        except UserApiError as e:
            logger.error("Error fetching users: %s", e)
            self.records = []
            self.modes = {}
            self.drafts = {}
            self.pending_delete = None
            self.error = LIST_ERROR_MESSAGE
            return False

        self.records = list(users)
        self.error = None
        # Rows are rebuilt from the fetch, so any in-progress edit state goes with them.
        self.modes = {}
        self.drafts = {}
        if self.pending_delete is not None and self.get(self.pending_delete) is None:
            self.pending_delete = None
        return True

    def create(self, name: str, email: str) -> bool:
        try:
            self.api.create_user(name, email)
        except UserApiError as e:
            logger.error("Error creating user: %s", e)
            return False
        logger.info("Created user %s <%s>", name, email)
        self.refresh()
        return True

    def toggle_edit(self, user_id: str, name: Optional[str] = None, email: Optional[str] = None) -> bool:
        """
        Flip a row between viewing and editing.

        Leaving edit mode saves: the edited text (arguments first, then the
        stored draft) becomes the row's values and an update is sent.
        Returns the update's outcome, or True when only entering edit mode.
        """
        record = self.get(user_id)
        if record is None:
            return False

        if self.mode(user_id) is RowMode.VIEWING:
            self.modes[user_id] = RowMode.EDITING
            self.drafts[user_id] = (record.name, record.email)
            return True

        draft_name, draft_email = self.drafts.pop(user_id, (record.name, record.email))
        self.modes[user_id] = RowMode.VIEWING
        new_name = draft_name if name is None else name
        new_email = draft_email if email is None else email
        self._replace(record.with_fields(new_name, new_email))
        return self.update(user_id, new_name, new_email)

    def update(self, user_id: str, name: str, email: str) -> bool:
        try:
            self.api.update_user(user_id, name, email)
        except UserApiError as e:
            logger.error("Error updating user: %s", e)
            return False
        logger.info("Updated user %s", user_id)
        if self.refresh_after_update:
            self.refresh()
        return True

    def request_delete(self, user_id: str) -> None:
        self.pending_delete = user_id

    def confirm_delete(self, accepted: bool) -> bool:
        user_id, self.pending_delete = self.pending_delete, None
        if user_id is None or not accepted:
            return False
        return self.delete(user_id)

    def delete(self, user_id: str) -> bool:
        try:
            self.api.delete_user(user_id)
        except UserApiError as e:
            logger.error("Error deleting user: %s", e)
            return False
        logger.info("Deleted user %s", user_id)
        self.refresh()
        return True

    def _replace(self, record: UserRecord) -> None:
        self.records = [record if r.id == record.id else r for r in self.records]

