"""
Public recipe list: free-text search over titles plus fixed-size pagination.

The whole collection is fetched once; filtering and paging happen locally.
"""

import logging
import math
from typing import List

from recipebook.models import Recipe
from recipebook.store.base import RecipeStore, TransportError

logger = logging.getLogger(__name__)

PAGE_SIZE = 6

STATE_LOADING = "loading"
STATE_READY = "ready"


class RecipeListModel:
    """
    State behind the public listing page.

    Attributes:
        recipes: Full collection in server order
        search_text: Current filter text
        current_page: 1-based page number. Not clamped: callers only offer
            pages in 1..total_pages.
        state: "loading" until load() has run, then "ready"
    """

    def __init__(self, store: RecipeStore, page_size: int = PAGE_SIZE):
        self.store = store
        self.page_size = page_size
        self.recipes: List[Recipe] = []
        self.search_text = ""
        self.current_page = 1
        self.state = STATE_LOADING

    def load(self) -> None:
        """Fetch the collection. A failed fetch leaves it empty."""
        self.state = STATE_LOADING
        try:
            self.recipes = self.store.list_recipes()
        except TransportError as exc:
            logger.warning("Could not load recipes: %s", exc)
            self.recipes = []
        finally:
            self.state = STATE_READY

    def set_search(self, text: str) -> None:
        """Update the filter; any change of text goes back to page 1."""
        text = text or ""
        if text != self.search_text:
            self.search_text = text
            self.current_page = 1

    def clear_search(self) -> None:
        self.search_text = ""
        self.current_page = 1

    def go_to_page(self, page: int) -> None:
        self.current_page = page

    @property
    def filtered(self) -> List[Recipe]:
        needle = self.search_text.lower()
        return [recipe for recipe in self.recipes if needle in recipe.title.lower()]

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.filtered) / self.page_size)

    @property
    def visible(self) -> List[Recipe]:
        start = (self.current_page - 1) * self.page_size
        return self.filtered[start:start + self.page_size]

    @property
    def is_empty(self) -> bool:
        """True when the ready list has nothing to show on the current page."""
        return self.state == STATE_READY and not self.visible
