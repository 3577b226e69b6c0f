"""
Admin dashboard: recipe CRUD over the remote store.

Successful saves and deletes are merged into the local list from the
server's answer instead of reloading everything (the spreadsheet API is slow).
Any failed save or delete reloads both collections to get back in sync.

A single `saving` flag serializes submit() and delete(): while one is
pending, further calls return immediately without touching the store.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional

from recipebook.models import Category, Recipe, RecipeForm
from recipebook.store.base import RecipeStore, TransportError

logger = logging.getLogger(__name__)


class AdminModel:
    """
    State behind the admin dashboard.

    Attributes:
        recipes: Recipes shown in the table
        categories: Categories offered by the form's selector
        form: Current form buffer
        editing_id: Id of the recipe being edited, None in create mode
        loading: True while load() runs
        saving: True while a submit or delete is in flight
    """

    def __init__(self, store: RecipeStore):
        self.store = store
        self.recipes: List[Recipe] = []
        self.categories: List[Category] = []
        self.form = RecipeForm()
        self.editing_id: Optional[int] = None
        self.loading = True
        self.saving = False

    def _fetch(self, what: str, fetch: Callable[[], List[Any]]) -> List[Any]:
        try:
            return fetch()
        except TransportError as exc:
            logger.warning("Could not load %s: %s", what, exc)
            return []

    def load(self) -> None:
        """Fetch recipes and categories side by side and wait for both."""
        self.loading = True
        try:
            with ThreadPoolExecutor(max_workers=2) as executor:
                recipes_future = executor.submit(self._fetch, "recipes", self.store.list_recipes)
                categories_future = executor.submit(self._fetch, "categories", self.store.list_categories)
                self.recipes = recipes_future.result()
                self.categories = categories_future.result()
        finally:
            self.loading = False

    # Form buffer

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def open_create(self) -> None:
        self.editing_id = None
        self.form = RecipeForm()

    def open_edit(self, recipe: Recipe) -> None:
        self.editing_id = recipe.id
        self.form = RecipeForm.from_recipe(recipe)

    def close_form(self) -> None:
        self.open_create()

    def update_form(self, **fields: Any) -> None:
        """Copy edited field values into the form buffer."""
        self.form = self.form.model_copy(update=fields)

    # Mutations

    def submit(self) -> bool:
        """
        Create or update from the form buffer.

        Returns:
            True when the store accepted the change. False when skipped
            (already saving, required fields missing) or failed.
        """
        if self.saving:
            return False

        missing = self.form.missing_required()
        if missing:
            logger.error("Recipe not saved, required fields missing: %s", ", ".join(missing))
            return False

        self.saving = True
        try:
            if self.is_editing:
                updated = self.store.update_recipe(self.editing_id, self.form)
                self.recipes = [updated if r.id == self.editing_id else r for r in self.recipes]
                logger.info("Updated recipe %s", self.editing_id)
            else:
                created = self.store.create_recipe(self.form)
                self.recipes = self.recipes + [created]
                logger.info("Created recipe %s", created.id)
            self.close_form()
            return True
        except TransportError as exc:
            logger.error("Could not save recipe: %s", exc)
            self.load()
            return False
        finally:
            self.saving = False

    def delete(self, recipe_id: int) -> bool:
        """Delete a recipe. Returns True when it is gone from the store."""
        if self.saving:
            return False

        self.saving = True
        try:
            self.store.delete_recipe(recipe_id)
            self.recipes = [r for r in self.recipes if r.id != recipe_id]
            logger.info("Deleted recipe %s", recipe_id)
            return True
        except TransportError as exc:
            logger.error("Could not delete recipe %s: %s", recipe_id, exc)
            self.load()
            return False
        finally:
            self.saving = False

    # Dashboard figures

    @property
    def category_names(self) -> List[str]:
        return [c.name for c in self.categories if c.name]

    def stats(self) -> Dict[str, int]:
        """Totals shown above the recipe table."""
        return {
            "recipes": len(self.recipes),
            "categories": len(self.categories),
            "likes": sum(r.likes for r in self.recipes),
        }
