"""
Layout primitives for consistent page structure.

Provides reusable components for the sidebar, page headers, KPI rows, recipe
cards and pagination.
"""

from typing import Callable, Optional
import streamlit as st

from recipebook.auth import AuthSession
from recipebook.listing import RecipeListModel
from recipebook.models import Recipe

HOME_PAGE = "app.py"
DETAIL_PAGE = "pages/01_📖_Recipe.py"
LOGIN_PAGE = "pages/02_🔐_Login.py"
ADMIN_PAGE = "pages/03_🛠_Admin.py"

SITE_TITLE = "Grandma's Recipes"
UNCATEGORIZED_LABEL = "Uncategorized"


def render_sidebar(auth: AuthSession) -> None:
    """
    Render the sidebar navigation.

    Shows the admin dashboard link and a logout button when logged in,
    otherwise a login link.
    """
    with st.sidebar:
        st.markdown(f"### 🍲 **{SITE_TITLE}**")
        st.divider()
        st.page_link(HOME_PAGE, label="Recipes", icon="🏠")
        if auth.is_authenticated():
            st.page_link(ADMIN_PAGE, label="Dashboard", icon="🛠")
            if st.button("Log out", use_container_width=True, key="sidebar_logout"):
                auth.logout()
                st.switch_page(HOME_PAGE)
        else:
            st.page_link(LOGIN_PAGE, label="Log in", icon="🔐")


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[Callable[[], None]] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        right: Optional callable that renders right-side content (e.g., buttons)
    """
    if right is not None:
        col_title, col_right = st.columns([3, 1])
        with col_title:
            st.markdown(f"# {title}")
            if subtitle:
                st.caption(subtitle)
        with col_right:
            right()
    else:
        st.markdown(f"# {title}")
        if subtitle:
            st.caption(subtitle)


def kpi_row(kpis: list[dict]) -> None:
    """
    Render a row of KPI metrics.

    Args:
        kpis: List of dicts with keys:
            - label: KPI label text
            - value: KPI value (number or string)
            - icon: Optional emoji or icon prefix
    """
    cols = st.columns(len(kpis))
    for col, kpi in zip(cols, kpis):
        with col:
            icon = kpi.get("icon", "")
            label = kpi.get("label", "")
            st.metric(label=f"{icon} {label}" if icon else label, value=kpi.get("value", ""))


def category_label(recipe: Recipe) -> str:
    return recipe.category or UNCATEGORIZED_LABEL


def recipe_card(recipe: Recipe, on_open: Callable[[Recipe], None]) -> None:
    """
    Render one recipe tile: image, title, category, time and likes.

    Args:
        recipe: Recipe to show
        on_open: Called when the tile's "View recipe" button is pressed
    """
    with st.container(border=True):
        if recipe.image_url:
            st.image(recipe.image_url, use_container_width=True)
        st.markdown(f"**{recipe.title}**")
        st.caption(f"🏷️ {category_label(recipe)}")
        meta = []
        if recipe.prep_time_label:
            meta.append(f"⏱️ {recipe.prep_time_label}")
        meta.append(f"❤️ {recipe.likes}")
        st.caption(" · ".join(meta))
        if st.button("View recipe", key=f"open_recipe_{recipe.id}", use_container_width=True):
            on_open(recipe)


def pagination(model: RecipeListModel) -> None:
    """
    Render previous / page number / next buttons for the listing.

    Hidden when everything fits on one page. Only pages 1..total_pages are
    offered, since the model does not clamp.
    """
    total = model.total_pages
    if total <= 1:
        return

    cols = st.columns(total + 2)
    with cols[0]:
        if st.button("‹", key="page_prev", disabled=model.current_page <= 1):
            model.go_to_page(model.current_page - 1)
            st.rerun()
    for page in range(1, total + 1):
        with cols[page]:
            button_type = "primary" if page == model.current_page else "secondary"
            if st.button(str(page), key=f"page_{page}", type=button_type):
                model.go_to_page(page)
                st.rerun()
    with cols[-1]:
        if st.button("›", key="page_next", disabled=model.current_page >= total):
            model.go_to_page(model.current_page + 1)
            st.rerun()


def render_footer() -> None:
    st.divider()
    st.caption(f"{SITE_TITLE} · traditional recipes handed down through the generations")
