"""
Users View
==========
List, create, edit in place and delete user records on the users server.

All state lives in a UserDirectory kept in st.session_state; widgets only
call its methods through on_click callbacks, so each interaction runs to
completion before the page reruns.
"""
from __future__ import annotations

from html import escape

import streamlit as st

from config import AppConfig
from data.models import RowMode, UserRecord
from data.service import DELETE_PROMPT, UserDirectory, get_users_client


DIRECTORY_KEY = "user_directory"
DIRECTORY_MODE_KEY = "user_directory_use_mock"
NEW_NAME_KEY = "new_user_name"
NEW_EMAIL_KEY = "new_user_email"


def _edit_keys(user_id: str) -> tuple[str, str]:
    return f"edit_name_{user_id}", f"edit_email_{user_id}"


def get_directory(cfg: AppConfig, use_mock: bool) -> UserDirectory:
    """Session-scoped view-model; rebuilt when the backend toggle changes."""
    directory = st.session_state.get(DIRECTORY_KEY)
    if directory is None or st.session_state.get(DIRECTORY_MODE_KEY) != use_mock:
        directory = UserDirectory(get_users_client(cfg, use_mock), refresh_after_update=cfg.refresh_after_update)
        st.session_state[DIRECTORY_KEY] = directory
        st.session_state[DIRECTORY_MODE_KEY] = use_mock
    if not directory.loaded:
        directory.refresh()
    return directory


# --- callbacks (run before the rerun that follows a click) ---

def _on_create() -> None:
    directory: UserDirectory = st.session_state[DIRECTORY_KEY]
    name = st.session_state.get(NEW_NAME_KEY, "")
    email = st.session_state.get(NEW_EMAIL_KEY, "")
    if directory.create(name, email):
        st.session_state[NEW_NAME_KEY] = ""
        st.session_state[NEW_EMAIL_KEY] = ""


def _on_toggle_edit(user_id: str) -> None:
    directory: UserDirectory = st.session_state[DIRECTORY_KEY]
    name_key, email_key = _edit_keys(user_id)

    if directory.mode(user_id) is RowMode.VIEWING:
        if directory.toggle_edit(user_id):
            _seed_edit_inputs(directory, user_id, force=True)
        return

    # Inputs dropped from session state come back as None; the directory's draft covers them.
    directory.toggle_edit(
        user_id,
        name=st.session_state.get(name_key),
        email=st.session_state.get(email_key),
    )


def _on_edit_input(user_id: str) -> None:
    name_key, email_key = _edit_keys(user_id)
    st.session_state[DIRECTORY_KEY].set_draft(
        user_id,
        name=st.session_state.get(name_key),
        email=st.session_state.get(email_key),
    )


def _on_request_delete(user_id: str) -> None:
    st.session_state[DIRECTORY_KEY].request_delete(user_id)


def _on_confirm_delete(accepted: bool) -> None:
    st.session_state[DIRECTORY_KEY].confirm_delete(accepted)


def _on_refresh() -> None:
    st.session_state[DIRECTORY_KEY].refresh()


# --- rendering ---

def _seed_edit_inputs(directory: UserDirectory, user_id: str, force: bool = False) -> None:
    draft = directory.draft(user_id)
    if draft is None:
        return
    for key, value in zip(_edit_keys(user_id), draft):
        if force or key not in st.session_state:
            st.session_state[key] = value


def _render_create_form() -> None:
    st.subheader("Add user")
    c1, c2, c3 = st.columns([3, 4, 1.4], vertical_alignment="bottom")
    with c1:
        st.text_input("Name", key=NEW_NAME_KEY, placeholder="Name")
    with c2:
        st.text_input("Email", key=NEW_EMAIL_KEY, placeholder="Email")
    with c3:
        st.button("Create User", key="create_user_btn", type="primary", on_click=_on_create)


def _render_row(directory: UserDirectory, record: UserRecord) -> None:
    name_key, email_key = _edit_keys(record.id)
    editing = directory.mode(record.id) is RowMode.EDITING
    if editing:
        _seed_edit_inputs(directory, record.id)

    with st.container(border=True):
        c1, c2, c3, c4 = st.columns([3, 4, 1, 1], vertical_alignment="center")
        with c1:
            if editing:
                st.text_input("Name", key=name_key, label_visibility="collapsed", on_change=_on_edit_input, args=(record.id,))
            else:
                st.markdown(f'<span class="user-name">{escape(record.name)}</span>', unsafe_allow_html=True)
        with c2:
            if editing:
                st.text_input("Email", key=email_key, label_visibility="collapsed", on_change=_on_edit_input, args=(record.id,))
            else:
                st.markdown(f'<span class="user-email">{escape(record.email)}</span>', unsafe_allow_html=True)
        with c3:
            st.button(
                "Save" if editing else "Edit",
                key=f"edit_{record.id}",
                type="primary" if editing else "secondary",
                on_click=_on_toggle_edit,
                args=(record.id,),
            )
        with c4:
            st.button(
                "Delete",
                key=f"delete_{record.id}",
                on_click=_on_request_delete,
                args=(record.id,),
            )

        if directory.pending_delete == record.id:
            st.warning(DELETE_PROMPT)
            y, n, _ = st.columns([1, 1, 4])
            with y:
                st.button("Yes, delete", key=f"confirm_delete_{record.id}", type="primary", on_click=_on_confirm_delete, args=(True,))
            with n:
                st.button("Cancel", key=f"cancel_delete_{record.id}", on_click=_on_confirm_delete, args=(False,))


def _render_user_list(directory: UserDirectory) -> None:
    head_l, head_r = st.columns([5, 1], vertical_alignment="bottom")
    with head_l:
        st.subheader("Users")
    with head_r:
        st.button("Refresh", key="refresh_users_btn", on_click=_on_refresh)

    if directory.error:
        st.error(directory.error)
        return
    if not directory.records:
        st.info("No users yet.")
        return

    for record in directory.records:
        _render_row(directory, record)


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Users")
    st.caption("Edit a row in place and press Save to send the change. Deleting asks for confirmation first.")

    directory = get_directory(cfg, use_mock)
    st.caption(f"Backend: `{directory.api.describe()}`")

    _render_create_form()
    st.divider()
    _render_user_list(directory)
