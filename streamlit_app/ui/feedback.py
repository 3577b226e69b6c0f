"""
User-facing messages for the Recipe Box pages.

Dashboard confirmations and errors, the empty states of the listing and
detail pages, and the spinner shown while an action waits on the sheet.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st

from ui.layout import HOME_PAGE


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display an error with an optional hint on what to do next.

    Args:
        message: What went wrong
        hint: Optional next step, e.g. "please try again"
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_success(message: str) -> None:
    st.success(f"✅ {message}")


def show_no_recipes(search_text: str = "", hint: Optional[str] = None) -> None:
    """
    Empty recipe list: nothing matches the search, or the book is empty.

    Args:
        search_text: Current search, "" when not searching
        hint: Overrides the default caption for an empty book
    """
    if search_text:
        st.info(f'🔎 **No recipes found for "{search_text}"**')
        st.caption("Try another word or clear the search.")
        return
    st.info("🍽️ **No recipes yet**")
    st.caption(hint or "Recipes added from the dashboard will show up here.")


def show_recipe_unavailable(recipe_id: Optional[int]) -> None:
    """Detail page with no recipe to show, plus a way back to the listing."""
    if recipe_id is None:
        st.info("📖 **No recipe selected**")
        st.caption("Pick a recipe from the list.")
    else:
        st.info("📭 **Recipe not found**")
        st.caption("It may have been removed from the book.")

    if st.button("Back to recipes", use_container_width=True, type="primary", key="back_to_recipes"):
        st.switch_page(HOME_PAGE)


@contextmanager
def action_spinner(action: str):
    """
    Spinner for an action the user started.

    Usage:
        with action_spinner("Saving recipe"):
            model.submit()
    """
    with st.spinner(f"{action}…"):
        yield
