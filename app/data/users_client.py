"""
Users Client - REST integration for the users collection
=========================================================
Thin transport over the users server:

    GET    /users        -> [{id, name, email}, ...]
    POST   /users        -> created record
    PUT    /users/{id}   -> updated record
    DELETE /users/{id}   -> status only

Every failure (connection error, timeout, non-2xx status, bad JSON) is raised
as UserApiError. Callers do not distinguish status codes.
"""
from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from config import AppConfig
from data.models import UserRecord, parse_user_list

logger = logging.getLogger(__name__)


class UserApiError(RuntimeError):
    def __init__(self, method: str, path: str, status: Optional[int] = None, reason: str = ""):
        self.method = method
        self.path = path
        self.status = status
        detail = f"HTTP error! status: {status}" if status is not None else reason
        super().__init__(f"{method} {path} failed: {detail}")


class UsersClient:
    """
    REST client for the users collection.

    One requests.Session per client so repeated calls reuse the connection.
    """

    def __init__(self, cfg: AppConfig, session: Optional[requests.Session] = None):
        self._collection_url = cfg.users_url
        self._timeout = cfg.request_timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def item_url(self, user_id: str) -> str:
        return f"{self._collection_url}/{quote(str(user_id), safe='')}"

    def _request(self, method: str, url: str, payload: Optional[dict] = None) -> requests.Response:
        try:
            resp = self._session.request(method, url, json=payload, timeout=self._timeout)
        except requests.RequestException as e:
            raise UserApiError(method, url, reason=f"{type(e).__name__}: {e}") from e
        if not 200 <= resp.status_code < 300:
            raise UserApiError(method, url, status=resp.status_code)
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    def _json(self, method: str, url: str, resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise UserApiError(method, url, reason="response was not valid JSON") from e

    def list_users(self) -> list[UserRecord]:
        url = self._collection_url
        resp = self._request("GET", url)
        try:
            return parse_user_list(self._json("GET", url, resp))
        except ValueError as e:
            raise UserApiError("GET", url, reason=str(e)) from e

    def create_user(self, name: str, email: str) -> None:
        self._request("POST", self._collection_url, {"name": name, "email": email})

    def update_user(self, user_id: str, name: str, email: str) -> None:
        self._request("PUT", self.item_url(user_id), {"name": name, "email": email})

    def delete_user(self, user_id: str) -> None:
        self._request("DELETE", self.item_url(user_id))

    def describe(self) -> str:
        return self._collection_url
