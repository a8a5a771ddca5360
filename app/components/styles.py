from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "User Directory"

# Tokens are written as __NAME__ and filled from THEME (upper-cased keys).
CSS = """
<style>
:root{
  --page: __PAGE__;
  --surface: __SURFACE__;
  --ink: __INK__;
  --muted: __MUTED__;
  --line: __LINE__;
  --accent: __ACCENT__;
  --accent-hover: __ACCENT_HOVER__;
  --danger: __DANGER__;
  --danger-soft: __DANGER_SOFT__;
  --editing-soft: __EDITING_SOFT__;
  --radius: __RADIUS_PX__px;
}

[data-testid="stAppViewContainer"]{ background: var(--page); color: var(--ink); }
.block-container{ padding-top: 1rem; max-width: 1100px; }
footer{ visibility: hidden; }

/* Header (components/header.py) */
.app-header{
  display: flex;
  align-items: center;
  justify-content: space-between;
  background: var(--surface);
  border: 1px solid var(--line);
  border-radius: var(--radius);
  padding: 10px 16px;
  margin-bottom: 12px;
}
.app-title{ font-size: 20px; font-weight: 700; }
.app-subtitle{ font-size: 13px; color: var(--muted); }
.pill{
  display: inline-flex;
  align-items: center;
  gap: 6px;
  border: 1px solid var(--line);
  border-radius: 999px;
  padding: 4px 10px;
  font-size: 12px;
  font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
}
.pill .dot{ width: 8px; height: 8px; border-radius: 50%; background: var(--accent); }

/* One bordered container per user row */
div[data-testid="stVerticalBlockBorderWrapper"]{
  background: var(--surface);
  border-radius: var(--radius);
}
.user-name{ font-weight: 600; }
.user-email{ color: var(--muted); word-break: break-all; }

/* A row in edit mode is the only one holding text inputs */
div[data-testid="stVerticalBlockBorderWrapper"]:has(input[type="text"]){
  background: var(--editing-soft);
  border-color: var(--accent);
}

/* Inline delete confirmation: the row shows a warning until Yes/Cancel */
div[data-testid="stVerticalBlockBorderWrapper"]:has(div[data-testid="stAlert"]){
  background: var(--danger-soft);
  border-color: var(--danger);
}

/* Row buttons: Edit/Delete outlined, Save/Yes/Create filled */
div.stButton > button{ border-radius: var(--radius); white-space: nowrap; }
div.stButton > button[kind="primary"]{ background: var(--accent); border-color: var(--accent); }
div.stButton > button[kind="primary"]:hover{ background: var(--accent-hover); }
div.stButton > button[kind="secondary"]:hover{ border-color: var(--accent); color: var(--accent); }

/* "Error loading users." replaces the list */
div[data-testid="stAlert"]:has(div[role="alert"]){ border-radius: var(--radius); }
</style>
"""


def build_css() -> str:
    css = CSS
    for name, value in THEME.items():
        css = css.replace(f"__{name.upper()}__", str(value))
    return css


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🗂️",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    st.markdown(build_css(), unsafe_allow_html=True)
