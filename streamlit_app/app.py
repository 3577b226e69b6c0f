"""
Recipe Box - Streamlit Frontend Main Entry Point.

This is the public recipe listing: a search box over recipe titles and a grid
of recipe cards, six per page.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and recipebook
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config

import streamlit as st

from recipebook.models import Recipe
from ui.feedback import show_no_recipes
from ui.layout import (
    DETAIL_PAGE,
    SITE_TITLE,
    page_header,
    pagination,
    recipe_card,
    render_footer,
    render_sidebar,
)
from utils.session import get_auth_session
from utils.state import get_list_model, refresh_list_model, select_recipe

api.config.configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title=SITE_TITLE,
    page_icon="🍲",
    layout="wide",
    initial_sidebar_state="expanded"
)

render_sidebar(get_auth_session())


def open_recipe(recipe: Recipe) -> None:
    select_recipe(recipe.id)
    st.switch_page(DETAIL_PAGE)


def clear_search() -> None:
    get_list_model().clear_search()
    st.session_state["recipe_search"] = ""


page_header(SITE_TITLE, subtitle="Traditional recipes handed down from generation to generation.")

with st.spinner("Loading recipes…"):
    model = get_list_model()

search_col, clear_col, refresh_col = st.columns([6, 1, 1])
with search_col:
    search_text = st.text_input(
        "Search recipes",
        key="recipe_search",
        placeholder="Search recipes…",
        label_visibility="collapsed",
    )
    model.set_search(search_text)
with clear_col:
    st.button("✕ Clear", on_click=clear_search, disabled=not model.search_text, use_container_width=True)
with refresh_col:
    if st.button("↻ Refresh", use_container_width=True):
        refresh_list_model()
        st.rerun()

if model.is_empty:
    show_no_recipes(model.search_text)
else:
    cols = st.columns(3, gap="medium")
    for index, recipe in enumerate(model.visible):
        with cols[index % 3]:
            recipe_card(recipe, on_open=open_recipe)

    pagination(model)

render_footer()
