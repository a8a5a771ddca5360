from __future__ import annotations

from html import escape

import streamlit as st


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="app-header">
  <div class="app-header-left">
    <div>
      <div class="app-title">{escape(app_name)}</div>
      <div class="app-subtitle">{escape(subtitle)}</div>
    </div>
  </div>
  <div class="pill"><span class="dot"></span>{escape(right_pill)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
