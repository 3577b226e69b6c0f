"""
Recipe API Client Module.

This module is the **single source of truth** for which recipe store the pages
talk to. Pages never build stores themselves; they call get_recipe_store().

Key principles:
- Configuration comes from api.config (RECIPEBOOK_API_URL, SHEETY_TOKEN, RECIPEBOOK_API_TIMEOUT)
- One store (and one pooled HTTP session) per server process
- Errors are not handled here: view models catch TransportError and degrade
"""

import streamlit as st

from api.config import StoreConfig
from recipebook.store.base import RecipeStore
from recipebook.store.sheety import SheetyStore


def get_backend_url() -> str:
    """
    Get the recipe API base URL.

    Returns:
        URL with trailing slash removed. Defaults to the local development server
        (http://localhost:8000); set RECIPEBOOK_API_URL to the Sheety project URL
        in production.
    """
    return StoreConfig.get_base_url()


@st.cache_resource
def get_recipe_store() -> RecipeStore:
    """
    Build the recipe store once per process.

    st.cache_resource shares it across sessions, which is safe because the
    store keeps no per-user state.
    """
    return SheetyStore(
        base_url=get_backend_url(),
        token=StoreConfig.get_token(),
        timeout=StoreConfig.get_timeout(),
    )
