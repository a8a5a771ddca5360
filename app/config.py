from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


# Colours and sizes for components/styles.py, the one place CSS is built.
THEME = {
    "page": "#F6F7F9",
    "surface": "#FFFFFF",
    "ink": "#1F2933",
    "muted": "#616E7C",
    "line": "#E4E7EB",
    "accent": "#2F6FEB",
    "accent_hover": "#1F56C4",
    "danger": "#C81E1E",
    "danger_soft": "#FDECEC",
    "editing_soft": "#EEF4FF",
    "radius_px": 8,
}


@dataclass(frozen=True)
class AppConfig:
    # REST server hosting the users collection
    api_base_url: str
    users_path: str
    request_timeout: float

    # Defaults
    default_use_mock: bool
    refresh_after_update: bool
    log_level: str

    @property
    def users_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/{self.users_path.strip('/')}"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getflag(name: str, default: str) -> bool:
    return (_getenv(name, default) or default).lower() in ("1", "true", "yes", "on")


def _gettimeout(name: str, default: str) -> float:
    raw = _getenv(name, default) or default
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return timeout


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - HOST/PORT of the users server collapse into API_BASE_URL
    """
    load_dotenv(override=False)

    return AppConfig(
        api_base_url=_getenv("API_BASE_URL", "http://127.0.0.1:8080") or "",
        users_path=_getenv("USERS_PATH", "/users") or "/users",
        request_timeout=_gettimeout("API_TIMEOUT_SECONDS", "10"),
        default_use_mock=_getflag("USE_MOCK_API", "false"),
        refresh_after_update=_getflag("REFRESH_AFTER_UPDATE", "false"),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
