from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


USE_MOCK_KEY = "use_mock"


@dataclass(frozen=True)
class SidebarState:
    use_mock: bool


def render_sidebar(cfg: AppConfig) -> SidebarState:
    # The toggle owns this key from its first render on; seeding it here
    # instead of passing value= keeps the widget's identity stable.
    st.session_state.setdefault(USE_MOCK_KEY, cfg.default_use_mock)

    with st.sidebar:
        st.markdown("### 🗂️ User Directory")
        st.caption("Accounts on the users server")

        st.toggle(
            "Use mock API",
            key=USE_MOCK_KEY,
            help="Keep records in memory for this session instead of calling the server. Switching reloads the list.",
        )

        st.markdown("**Users endpoint**")
        st.code("in-memory" if st.session_state[USE_MOCK_KEY] else cfg.users_url, language="text")
        if cfg.refresh_after_update:
            st.caption("The list is fetched again after each saved edit.")

    return SidebarState(use_mock=bool(st.session_state[USE_MOCK_KEY]))
