"""
UI Components Module.

This module provides the layout primitives and feedback helpers shared by the
Recipe Box Streamlit pages.
"""

from ui.feedback import action_spinner, show_error, show_no_recipes, show_recipe_unavailable, show_success
from ui.layout import kpi_row, page_header, recipe_card, render_footer, render_sidebar

__all__ = [
    "action_spinner",
    "show_error",
    "show_no_recipes",
    "show_recipe_unavailable",
    "show_success",
    "kpi_row",
    "page_header",
    "recipe_card",
    "render_footer",
    "render_sidebar",
]
