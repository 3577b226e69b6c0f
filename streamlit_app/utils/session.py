"""
Client session utilities for Streamlit pages.

This module decides where client-side state lives and hands out the objects
that own it:
- get_or_create_client_id(): identifier of this browser session
- get_client_storage(): st.session_state by default, or a shared JSON file
  partitioned by client id when RECIPEBOOK_STORAGE=file
- get_auth_session(): admin login state over that storage
- require_admin(): gate for pages that need the admin login
"""

import uuid

import streamlit as st

from api.config import ClientConfig
from recipebook.auth import AuthSession
from recipebook.storage import STORAGE_FILE, ClientStorage, open_client_storage
from ui.layout import LOGIN_PAGE

CLIENT_ID_KEY = "client_id"
CLIENT_ID_PARAM = "client"
STORAGE_KEY = "client_storage"
AUTH_KEY = "auth_session"


def get_or_create_client_id() -> str:
    """
    Get or create the id of this browser session.

    A ?client= query parameter wins, so a bookmarked link brings back the
    same file-backed state after a restart. Otherwise a new UUID is made and
    kept in st.session_state for the rest of the session.
    """
    if CLIENT_ID_KEY not in st.session_state:
        st.session_state[CLIENT_ID_KEY] = st.query_params.get(CLIENT_ID_PARAM) or str(uuid.uuid4())
    return st.session_state[CLIENT_ID_KEY]


def get_client_storage() -> ClientStorage:
    """
    Get or create the client storage for this browser session.

    Returns:
        MemoryStorage over st.session_state in "session" mode, otherwise a
        JsonFileStorage at RECIPEBOOK_STATE_FILE scoped to this client.
    """
    if STORAGE_KEY not in st.session_state:
        backend = ClientConfig.get_storage_backend()
        client_id = get_or_create_client_id()
        if backend == STORAGE_FILE:
            st.query_params[CLIENT_ID_PARAM] = client_id
        st.session_state[STORAGE_KEY] = open_client_storage(
            backend,
            st.session_state,
            ClientConfig.get_state_file(),
            client_id,
        )
    return st.session_state[STORAGE_KEY]


def get_auth_session() -> AuthSession:
    if AUTH_KEY not in st.session_state:
        st.session_state[AUTH_KEY] = AuthSession(
            get_client_storage(),
            delay=ClientConfig.get_login_delay(),
        )
    return st.session_state[AUTH_KEY]


def require_admin() -> AuthSession:
    """
    Stop rendering and go to the login page unless the admin is logged in.

    Call this before drawing anything on an admin-only page.
    """
    auth = get_auth_session()
    if not auth.is_authenticated():
        st.switch_page(LOGIN_PAGE)
    return auth
