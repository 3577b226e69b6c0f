"""
Recipe detail: one recipe plus the like button.

A client may like each recipe once. The liked-set in client storage is what
enforces that; the server only ever sees a single increment per recipe from
this client.
"""

import logging
from typing import Optional

from recipebook.likes import LikedRecipes
from recipebook.models import Recipe
from recipebook.store.base import RecipeStore, TransportError

logger = logging.getLogger(__name__)

STATE_LOADING = "loading"
STATE_FOUND = "found"
STATE_NOT_FOUND = "not_found"


class RecipeDetailModel:
    """
    State behind the detail page for a single recipe id.

    Attributes:
        recipe: Loaded recipe, None until found
        likes: Like counter shown on the page
        liked: True once this client has liked the recipe
        liking: True while an increment is in flight
        state: "loading", "found" or "not_found" (terminal)
    """

    def __init__(self, store: RecipeStore, liked_recipes: LikedRecipes, recipe_id: int):
        self.store = store
        self.liked_recipes = liked_recipes
        self.recipe_id = recipe_id
        self.recipe: Optional[Recipe] = None
        self.likes = 0
        self.liked = False
        self.liking = False
        self.state = STATE_LOADING

    def load(self) -> None:
        self.state = STATE_LOADING
        try:
            recipe = self.store.get_recipe(self.recipe_id)
        except TransportError as exc:
            logger.warning("Could not load recipe %s: %s", self.recipe_id, exc)
            recipe = None

        if recipe is None:
            self.recipe = None
            self.state = STATE_NOT_FOUND
            return

        self.recipe = recipe
        self.likes = recipe.likes
        self.liked = self.liked_recipes.contains(self.recipe_id)
        self.state = STATE_FOUND

    @property
    def can_like(self) -> bool:
        return self.state == STATE_FOUND and not self.liked and not self.liking

    def like(self) -> bool:
        """
        Like the recipe once.

        Returns:
            True if the like was recorded. False when it was skipped (already
            liked, in flight, nothing loaded) or failed; a failed like leaves
            all state untouched and can be retried.
        """
        if not self.can_like:
            return False

        self.liking = True
        try:
            new_likes = self.store.increment_like(self.recipe_id)
        except TransportError as exc:
            logger.error("Could not like recipe %s: %s", self.recipe_id, exc)
            return False
        finally:
            self.liking = False

        if new_likes is None:
            logger.warning("Recipe %s disappeared before it could be liked", self.recipe_id)
            return False

        self.likes = new_likes
        self.liked = True
        self.liked_recipes.add(self.recipe_id)
        return True
