"""
Pydantic schemas for the development server's request and response bodies.

Bodies follow the Sheety convention of wrapping records in a field named
after the resource:
- RecipeEnvelope: {"recipe": {...}} for single-recipe requests and responses
- RecipeListResponse: {"recipes": [...]}
- CategoryListResponse: {"categories": [...]}

Records use the storage shape defined in recipebook.models.
"""

from typing import List

from pydantic import BaseModel, Field

from recipebook.models import Category, RecipeRecord


class RecipeEnvelope(BaseModel):
    """Single recipe wrapped under "recipe"."""
    recipe: RecipeRecord = Field(..., description="Recipe row in storage shape")


class RecipeListResponse(BaseModel):
    recipes: List[RecipeRecord] = Field(default_factory=list)


class CategoryListResponse(BaseModel):
    categories: List[Category] = Field(default_factory=list)
