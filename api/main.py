"""
Local development server for Recipe Box.

Serves the same REST contract as the Sheety project the site runs against in
production, backed by an in-memory sheet seeded with sample recipes:
- GET /recipes: List every recipe
- GET /recipes/{id}: Get one recipe (404 with a Sheety-style error body if missing)
- POST /recipes: Add a recipe
- PUT /recipes/{id}: Update the fields present in the body
- DELETE /recipes/{id}: Delete a recipe
- GET /categories: List every category
- GET /health: Health check

Run the server with:
    uvicorn api.main:app --reload

Then start the front-end with RECIPEBOOK_API_URL=http://localhost:8000 (the default).
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time

from fastapi import FastAPI, Response, status
from fastapi.responses import JSONResponse

from api.schemas import CategoryListResponse, RecipeEnvelope, RecipeListResponse
from api.sheet import InMemorySheet

api.config.configure_logging()
logger = logging.getLogger(__name__)

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

app = FastAPI(
    title="Recipe Box Development API",
    description="Sheety-compatible recipes and categories endpoints backed by an in-memory sheet",
    version="1.0.0",
    tags_metadata=[
        {"name": "recipes", "description": "Recipe rows (storage shape)."},
        {"name": "categories", "description": "Read-only category rows."},
        {"name": "health", "description": "Health check and monitoring endpoints."},
    ],
)

SHEET = InMemorySheet.seeded()


def _row_not_found(recipe_id: int) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"errors": [{"detail": f"No rows found for id {recipe_id}"}]},
    )


@app.get("/recipes", response_model=RecipeListResponse, tags=["recipes"])
def list_recipes():
    return RecipeListResponse(recipes=SHEET.list_recipes())


@app.get("/recipes/{recipe_id}", response_model=RecipeEnvelope, tags=["recipes"])
def get_recipe(recipe_id: int):
    record = SHEET.get_recipe(recipe_id)
    if record is None:
        return _row_not_found(recipe_id)
    return RecipeEnvelope(recipe=record)


@app.post("/recipes", response_model=RecipeEnvelope, tags=["recipes"])
def add_recipe(body: RecipeEnvelope):
    """
    Add a recipe row.

    The id is always assigned here; any id in the body is ignored.
    """
    record = SHEET.add_recipe(body.recipe.model_dump(exclude_unset=True))
    logger.info("Added recipe row %d", record.id)
    return RecipeEnvelope(recipe=record)


@app.put("/recipes/{recipe_id}", response_model=RecipeEnvelope, tags=["recipes"])
def update_recipe(recipe_id: int, body: RecipeEnvelope):
    """
    Update a recipe row.

    Only the fields present in the body change, so {"recipe": {"likes": 3}}
    leaves everything else as it was.
    """
    record = SHEET.update_recipe(recipe_id, body.recipe.model_dump(exclude_unset=True))
    if record is None:
        return _row_not_found(recipe_id)
    return RecipeEnvelope(recipe=record)


@app.delete("/recipes/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["recipes"])
def delete_recipe(recipe_id: int):
    if not SHEET.delete_recipe(recipe_id):
        return _row_not_found(recipe_id)
    logger.info("Deleted recipe row %d", recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/categories", response_model=CategoryListResponse, tags=["categories"])
def list_categories():
    return CategoryListResponse(categories=SHEET.list_categories())


@app.get("/health", tags=["health"])
def health():
    """
    Health check endpoint.

    Returns:
        Dictionary with status, API metadata and uptime. Always 200 OK if reachable.
    """
    return {
        "status": "ok",
        "name": "Recipe Box Development API",
        "version": "1.0.0",
        "uptime_seconds": int(time.time() - _APP_START_TIME),
        "recipes": len(SHEET.list_recipes()),
    }
