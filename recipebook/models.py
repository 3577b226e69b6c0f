"""
Recipe and category models for the recipe box.

This module defines the two record shapes the system works with and the
translation between them:

- RecipeRecord: the storage shape, as rows come back from the spreadsheet API
  (field names: title, image, prep_time, ingredients, instructions, likes, category)
- Recipe: the UI shape used by every view model and page
  (field names: title, image_url, prep_time_label, ingredients, instructions,
  likes, category, category_selector)

# NOTE: The spreadsheet API is loose about types. Empty cells may be missing
    entirely or come back as "", numeric-looking cells come back as numbers.
    RecipeRecord absorbs that; Recipe never carries None for a field value.

Field mapping (storage -> UI):
- title        -> title
- image        -> image_url
- prep_time    -> prep_time_label
- ingredients  -> ingredients
- instructions -> instructions
- likes        -> likes
- category     -> category AND category_selector
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Fields that must be filled in before the admin form is submitted
REQUIRED_FORM_FIELDS = ("title", "image_url", "category_selector")


def _split_lines(block: str) -> List[str]:
    return [line.strip() for line in block.splitlines() if line.strip()]


class RecipeRecord(BaseModel):
    """
    Recipe row as stored in the spreadsheet backend.

    Every field is optional because the sheet may leave cells empty.
    """
    id: Optional[int] = Field(None, description="Row identifier assigned by the store")
    title: Optional[str] = Field(None, description="Recipe title")
    image: Optional[str] = Field(None, description="Image URL")
    prep_time: Optional[str] = Field(None, description="Free-text preparation time label (e.g. '45 min')")
    ingredients: Optional[str] = Field(None, description="Newline-separated ingredient list")
    instructions: Optional[str] = Field(None, description="Newline-separated preparation steps")
    likes: Optional[int] = Field(None, ge=0, description="Like counter")
    category: Optional[str] = Field(None, description="Category name (no foreign key)")

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("id", "likes", mode="before")
    @classmethod
    def _blank_cell_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Recipe(BaseModel):
    """
    Recipe in the UI shape.

    Text fields default to "" and likes to 0, so pages never have to deal
    with missing values. category_selector duplicates category and is what
    the admin form binds its category dropdown to.
    """
    id: Optional[int] = Field(None, description="Row identifier assigned by the store")
    title: str = ""
    image_url: str = ""
    prep_time_label: str = ""
    ingredients: str = ""
    instructions: str = ""
    likes: int = Field(0, ge=0)
    category: str = ""
    category_selector: str = ""

    @property
    def ingredient_list(self) -> List[str]:
        """Ingredients block split into one entry per non-blank line."""
        return _split_lines(self.ingredients)

    @property
    def instruction_steps(self) -> List[str]:
        """Instructions block split into one step per non-blank line."""
        return _split_lines(self.instructions)


class RecipeForm(BaseModel):
    """
    Admin form buffer for creating or editing a recipe.

    likes is carried only so callers can pass whatever the form holds; the
    store ignores it on create and never sends it on update.
    """
    title: str = ""
    image_url: str = ""
    prep_time_label: str = ""
    ingredients: str = ""
    instructions: str = ""
    category_selector: str = ""
    likes: Optional[int] = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeForm":
        """Build a fully populated form from an existing recipe."""
        return cls(
            title=recipe.title,
            image_url=recipe.image_url,
            prep_time_label=recipe.prep_time_label,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            category_selector=recipe.category_selector or recipe.category,
        )

    def missing_required(self) -> List[str]:
        """Names of required fields that are empty or whitespace only."""
        return [name for name in REQUIRED_FORM_FIELDS if not getattr(self, name).strip()]


class Category(BaseModel):
    """Recipe category. Read-only from the application's point of view."""
    id: Optional[int] = None
    name: str = ""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


def normalize_recipe(raw: Union[RecipeRecord, Mapping[str, Any]]) -> Recipe:
    """
    Translate a storage-shape record into the UI shape.

    Args:
        raw: RecipeRecord or the raw dict from the API response

    Returns:
        Recipe with every missing text field set to "" and likes to 0.
    """
    record = raw if isinstance(raw, RecipeRecord) else RecipeRecord.model_validate(raw)
    category = record.category or ""
    return Recipe(
        id=record.id,
        title=record.title or "",
        image_url=record.image or "",
        prep_time_label=record.prep_time or "",
        ingredients=record.ingredients or "",
        instructions=record.instructions or "",
        likes=record.likes or 0,
        category=category,
        category_selector=category,
    )


def denormalize_recipe(data: Union[Recipe, RecipeForm]) -> Dict[str, Any]:
    """
    Translate a UI-shape recipe or form into a storage-shape payload.

    The category is taken from category_selector, which is what the form
    edits. id and likes are only included when the source carries them.

    Returns:
        Dict suitable for the "recipe" field of a request body.
    """
    payload: Dict[str, Any] = {
        "title": data.title,
        "image": data.image_url,
        "prep_time": data.prep_time_label,
        "ingredients": data.ingredients,
        "instructions": data.instructions,
        "category": data.category_selector,
    }
    if isinstance(data, Recipe):
        if data.id is not None:
            payload["id"] = data.id
        payload["likes"] = data.likes
    elif data.likes is not None:
        payload["likes"] = data.likes
    return payload


def normalize_category(raw: Union[Category, Mapping[str, Any]]) -> Category:
    """Validate a category row coming from the API."""
    if isinstance(raw, Category):
        return raw
    return Category.model_validate(raw)
