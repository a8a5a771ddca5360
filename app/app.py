"""
Entry point: `streamlit run app/app.py`.

Page logic lives in app/views/users.py; env reads happen only in config.py.
"""

from __future__ import annotations

import logging
import os
import sys

# Modules under app/ import each other by bare name (`from config import ...`).
APP_DIR = os.path.dirname(__file__)
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

import streamlit as st  # noqa: E402

from components.header import render_header  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.styles import apply_theme  # noqa: E402
from config import AppConfig, get_config  # noqa: E402
from views import users  # noqa: E402

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(cfg: AppConfig) -> None:
    # Only the first rerun in a process installs a handler.
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO), format=LOG_FORMAT)


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg)
    sidebar = render_sidebar(cfg)

    render_header(
        app_name="User Directory",
        subtitle="Create, edit and remove accounts",
        right_pill="Mock API" if sidebar.use_mock else cfg.api_base_url,
    )
    users.render(cfg, sidebar.use_mock)


if __name__ == "__main__":
    main()
