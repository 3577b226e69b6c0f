"""
Liked-recipes set for the current client.

Stored as a JSON array of recipe ids under a single client storage key.
The set only grows: ids are never removed, even when the recipe is deleted.
"""

import json
import logging
from typing import List

from recipebook.storage import ClientStorage

logger = logging.getLogger(__name__)

LIKED_RECIPES_KEY = "liked_recipes"


class LikedRecipes:
    """Recipe ids this client has already liked."""

    def __init__(self, storage: ClientStorage):
        self.storage = storage

    def ids(self) -> List[int]:
        raw = self.storage.get_item(LIKED_RECIPES_KEY)
        if not raw:
            return []
        try:
            values = json.loads(raw)
        except ValueError:
            logger.warning("Stored liked recipes are not valid JSON, starting empty")
            return []
        if not isinstance(values, list):
            return []

        ids = []
        for value in values:
            try:
                ids.append(int(value))
            except (TypeError, ValueError):
                continue
        return ids

    def contains(self, recipe_id: int) -> bool:
        return int(recipe_id) in self.ids()

    def add(self, recipe_id: int) -> None:
        ids = self.ids()
        if int(recipe_id) in ids:
            return
        ids.append(int(recipe_id))
        self.storage.set_item(LIKED_RECIPES_KEY, json.dumps(ids))
