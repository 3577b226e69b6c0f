"""
Base store abstract class for the remote recipe collection.

This module defines the interface every recipe store must implement, so view
models can be written (and tested) against the contract rather than a
particular backend.

All stores must:
- Return recipes in the UI shape (recipebook.models.Recipe)
- Report "no such record" as None, not as an exception
- Raise TransportError for any network or HTTP failure, without retrying
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from recipebook.models import Category, Recipe, RecipeForm


class TransportError(Exception):
    """Raised when the remote store cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RecipeStore(ABC):
    """
    Abstract base class for recipe stores.

    Implementations translate between the storage shape and the UI shape and
    talk to whatever holds the recipes.
    """

    @abstractmethod
    def list_recipes(self) -> List[Recipe]:
        """
        Fetch every recipe.

        Returns:
            Recipes in the order the server returns them (no client-side sort).
        """

    @abstractmethod
    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        """
        Fetch one recipe.

        Returns:
            The recipe, or None if the server reports no such record.
        """

    @abstractmethod
    def create_recipe(self, form: RecipeForm) -> Recipe:
        """
        Create a recipe from a form. The stored like count always starts at 0.

        Returns:
            The record as created by the server, including its identifier.
        """

    @abstractmethod
    def update_recipe(self, recipe_id: int, form: RecipeForm) -> Recipe:
        """
        Submit the form's fields for an existing recipe.

        Returns:
            The updated record.
        """

    @abstractmethod
    def delete_recipe(self, recipe_id: int) -> bool:
        """Delete a recipe. Returns True on success, raises TransportError otherwise."""

    @abstractmethod
    def increment_like(self, recipe_id: int) -> Optional[int]:
        """
        Add one like to a recipe.

        Returns:
            The new like count, or None if the recipe does not exist.
        """

    @abstractmethod
    def list_categories(self) -> List[Category]:
        """Fetch every category."""
