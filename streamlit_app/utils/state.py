"""
View Model State Module.

Streamlit reruns the page script on every interaction, so view models are kept
in st.session_state and reused across reruns. Each getter builds its model on
first use and runs the model's initial load once.

Models live only for the current Streamlit session. Persistent client
state (login token, liked recipes) lives in client storage instead, see
utils.session.
"""

from typing import Optional

import streamlit as st

from recipebook.admin import AdminModel
from recipebook.detail import RecipeDetailModel
from recipebook.likes import LikedRecipes
from recipebook.listing import RecipeListModel
from utils.api_client import get_recipe_store
from utils.session import get_client_storage

LIST_MODEL_KEY = "recipe_list_model"
DETAIL_MODEL_KEY = "recipe_detail_model"
ADMIN_MODEL_KEY = "admin_model"
SELECTED_RECIPE_KEY = "selected_recipe_id"


def get_list_model() -> RecipeListModel:
    if LIST_MODEL_KEY not in st.session_state:
        model = RecipeListModel(get_recipe_store())
        model.load()
        st.session_state[LIST_MODEL_KEY] = model
    return st.session_state[LIST_MODEL_KEY]


def refresh_list_model() -> None:
    """Drop the cached listing so the next visit fetches recipes again."""
    st.session_state.pop(LIST_MODEL_KEY, None)


def get_detail_model(recipe_id: int) -> RecipeDetailModel:
    """
    Get the detail model for recipe_id, replacing the cached one if it was
    built for a different recipe.
    """
    model: Optional[RecipeDetailModel] = st.session_state.get(DETAIL_MODEL_KEY)
    if model is None or model.recipe_id != recipe_id:
        model = RecipeDetailModel(
            get_recipe_store(),
            LikedRecipes(get_client_storage()),
            recipe_id,
        )
        model.load()
        st.session_state[DETAIL_MODEL_KEY] = model
    return model


def get_admin_model() -> AdminModel:
    if ADMIN_MODEL_KEY not in st.session_state:
        model = AdminModel(get_recipe_store())
        model.load()
        st.session_state[ADMIN_MODEL_KEY] = model
    return st.session_state[ADMIN_MODEL_KEY]


def select_recipe(recipe_id: Optional[int]) -> None:
    """Remember which recipe the detail page should show."""
    st.session_state[SELECTED_RECIPE_KEY] = recipe_id


def get_selected_recipe_id() -> Optional[int]:
    """
    Recipe id for the detail page.

    The ?id= query parameter wins so detail links can be shared; otherwise
    the last recipe picked from the listing.
    """
    raw = st.query_params.get("id")
    if raw is None:
        raw = st.session_state.get(SELECTED_RECIPE_KEY)
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None
