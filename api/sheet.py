"""
In-memory stand-in for the recipes spreadsheet.

Used by the development server so the front-end can run without a Sheety
project. Rows behave like sheet rows: ids start at 2 (row 1 is the header),
new rows take the next id after the highest one, and updates only touch the
fields they carry.

Data resets whenever the server restarts.
"""

import threading
from typing import Any, Dict, List, Optional

from recipebook.models import Category, RecipeRecord

FIRST_ROW_ID = 2

SEED_CATEGORIES = ["Soups", "Main courses", "Desserts", "Bread & baking"]

SEED_RECIPES: List[Dict[str, Any]] = [
    {
        "title": "Caldo Verde",
        "image": "https://images.unsplash.com/photo-1547592166-23ac45744acd",
        "prep_time": "40 min",
        "ingredients": "4 potatoes\n1 onion\n2 garlic cloves\n200 g kale\n1 chouriço\nOlive oil",
        "instructions": "Boil the potatoes with the onion and garlic.\nBlend until smooth.\n"
                        "Add the finely sliced kale and simmer 5 minutes.\nServe with sliced chouriço.",
        "likes": 12,
        "category": "Soups",
    },
    {
        "title": "Roast Chicken with Potatoes",
        "image": "https://images.unsplash.com/photo-1598103442097-8b74394b95c6",
        "prep_time": "1 h 30 min",
        "ingredients": "1 whole chicken\n1 kg potatoes\n1 lemon\n4 garlic cloves\nPaprika\nWhite wine",
        "instructions": "Season the chicken with paprika, garlic and lemon.\n"
                        "Surround with potatoes and a glass of wine.\nRoast at 200 °C for 75 minutes.",
        "likes": 8,
        "category": "Main courses",
    },
    {
        "title": "Rice Pudding",
        "image": "https://images.unsplash.com/photo-1488477181946-6428a0291777",
        "prep_time": "50 min",
        "ingredients": "200 g short-grain rice\n1 l milk\n150 g sugar\n1 lemon peel\n4 egg yolks\nCinnamon",
        "instructions": "Cook the rice in water until absorbed.\nAdd milk and lemon peel, stir until creamy.\n"
                        "Off the heat, stir in sugar and yolks.\nDust with cinnamon.",
        "likes": 21,
        "category": "Desserts",
    },
    {
        "title": "Corn Bread",
        "image": "https://images.unsplash.com/photo-1509440159596-0249088772ff",
        "prep_time": "2 h",
        "ingredients": "300 g corn flour\n200 g wheat flour\n20 g yeast\nWarm water\nSalt",
        "instructions": "Scald the corn flour with boiling water.\nMix in wheat flour, yeast and salt.\n"
                        "Let rise for one hour.\nBake at 220 °C for 40 minutes.",
        "likes": 3,
        "category": "Bread & baking",
    },
]


class InMemorySheet:
    """Thread-safe rows for the recipes and categories tabs."""

    def __init__(self):
        self._lock = threading.Lock()
        self._recipes: Dict[int, RecipeRecord] = {}
        self._categories: List[Category] = []

    @classmethod
    def seeded(cls) -> "InMemorySheet":
        sheet = cls()
        sheet.reset()
        return sheet

    def reset(self, seed: bool = True) -> None:
        """Drop every row, then reload the sample data unless seed is False."""
        with self._lock:
            self._recipes = {}
            self._categories = []
            if not seed:
                return
            for offset, name in enumerate(SEED_CATEGORIES):
                self._categories.append(Category(id=FIRST_ROW_ID + offset, name=name))
            for offset, row in enumerate(SEED_RECIPES):
                row_id = FIRST_ROW_ID + offset
                self._recipes[row_id] = RecipeRecord(id=row_id, **row)

    def _next_id(self) -> int:
        return max(self._recipes, default=FIRST_ROW_ID - 1) + 1

    def list_recipes(self) -> List[RecipeRecord]:
        with self._lock:
            return [self._recipes[row_id] for row_id in sorted(self._recipes)]

    def get_recipe(self, recipe_id: int) -> Optional[RecipeRecord]:
        with self._lock:
            return self._recipes.get(recipe_id)

    def add_recipe(self, fields: Dict[str, Any]) -> RecipeRecord:
        with self._lock:
            row_id = self._next_id()
            values = {k: v for k, v in fields.items() if k != "id"}
            values.setdefault("likes", 0)
            record = RecipeRecord(id=row_id, **values)
            self._recipes[row_id] = record
            return record

    def update_recipe(self, recipe_id: int, fields: Dict[str, Any]) -> Optional[RecipeRecord]:
        with self._lock:
            current = self._recipes.get(recipe_id)
            if current is None:
                return None
            changes = {k: v for k, v in fields.items() if k != "id"}
            record = current.model_copy(update=changes)
            self._recipes[recipe_id] = record
            return record

    def delete_recipe(self, recipe_id: int) -> bool:
        with self._lock:
            return self._recipes.pop(recipe_id, None) is not None

    def list_categories(self) -> List[Category]:
        with self._lock:
            return list(self._categories)
