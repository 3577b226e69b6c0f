"""
Sheety store - recipes kept in a Google Sheet, exposed as a REST API.

Endpoints (relative to the configured base URL):
- GET    /recipes            -> {"recipes": [...]}
- GET    /recipes/{id}       -> {"recipe": {...}}
- POST   /recipes            <- {"recipe": {...}}   -> {"recipe": {...}}
- PUT    /recipes/{id}       <- {"recipe": {...}}   -> {"recipe": {...}}
- DELETE /recipes/{id}
- GET    /categories         -> {"categories": [...]}

PUT only touches the fields present in the body, which is what the like
increment relies on.

# NOTE: increment_like() is a read-modify-write. Two clients liking the same
    recipe at the same moment can both read N and both write N + 1, so one
    like is lost. The sheet offers no atomic increment to fix this with.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests
from pydantic import ValidationError

from recipebook.models import (
    Category,
    Recipe,
    RecipeForm,
    denormalize_recipe,
    normalize_category,
    normalize_recipe,
)
from recipebook.store.base import RecipeStore, TransportError

logger = logging.getLogger(__name__)

RECIPES_RESOURCE = "recipes"
CATEGORIES_RESOURCE = "categories"

DEFAULT_TIMEOUT_SECONDS = 10.0

T = TypeVar("T")


class SheetyStore(RecipeStore):
    """
    Recipe store backed by a Sheety project.

    Attributes:
        base_url: Project URL without trailing slash
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        allow_missing: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """
        Send one request and decode the JSON body.

        Args:
            method: HTTP method
            path: Path relative to base_url
            payload: Optional JSON body
            allow_missing: Return None instead of raising on HTTP 404

        Returns:
            Decoded body ({} for empty responses), or None for a tolerated 404.

        Raises:
            TransportError: On connection errors, timeouts, HTTP errors or a
                body that is not a JSON object.
        """
        url = f"{self.base_url}/{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, json=payload, timeout=self.timeout)
            if allow_missing and response.status_code == 404:
                return None
            response.raise_for_status()
            if not response.content:
                return {}
            body = response.json()
        except requests.exceptions.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise TransportError(f"{method} {url} failed with HTTP {status_code}", status_code) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        except ValueError as exc:
            raise TransportError(f"{method} {url} returned a body that is not JSON") from exc

        if not isinstance(body, dict):
            raise TransportError(f"{method} {url} returned {type(body).__name__} instead of a JSON object")
        return body

    @staticmethod
    def _rows(data: Dict[str, Any], key: str) -> List[Any]:
        rows = data.get(key) or []
        if not isinstance(rows, list):
            raise TransportError(f'"{key}" in the response is not a list')
        return rows

    @staticmethod
    def _decode(what: str, parse: Callable[[Any], T], raw: Any) -> T:
        try:
            return parse(raw)
        except ValidationError as exc:
            raise TransportError(f"{what} has an unexpected shape ({exc.error_count()} invalid fields)") from exc

    def _created_recipe(self, data: Dict[str, Any]) -> Recipe:
        """The record echoed by POST. Without one there is nothing to merge."""
        raw = data.get("recipe")
        if not raw:
            raise TransportError("Create response carried no recipe record")
        created = self._decode("Created recipe", normalize_recipe, raw)
        if created.id is None:
            raise TransportError("Create response carried a recipe without an id")
        return created

    def list_recipes(self) -> List[Recipe]:
        data = self._request("GET", RECIPES_RESOURCE) or {}
        return [self._decode("Recipe row", normalize_recipe, row) for row in self._rows(data, "recipes")]

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        data = self._request("GET", f"{RECIPES_RESOURCE}/{recipe_id}", allow_missing=True)
        if not data or not data.get("recipe"):
            return None
        return self._decode(f"Recipe {recipe_id}", normalize_recipe, data["recipe"])

    def create_recipe(self, form: RecipeForm) -> Recipe:
        record = denormalize_recipe(form)
        record["likes"] = 0
        data = self._request("POST", RECIPES_RESOURCE, {"recipe": record}) or {}
        return self._created_recipe(data)

    def update_recipe(self, recipe_id: int, form: RecipeForm) -> Recipe:
        record = denormalize_recipe(form)
        record.pop("likes", None)
        data = self._request("PUT", f"{RECIPES_RESOURCE}/{recipe_id}", {"recipe": record}) or {}
        updated = self._decode(f"Recipe {recipe_id}", normalize_recipe, data.get("recipe") or {})
        if updated.id is None:
            # Some sheets echo the row without its id
            updated.id = recipe_id
        return updated

    def delete_recipe(self, recipe_id: int) -> bool:
        self._request("DELETE", f"{RECIPES_RESOURCE}/{recipe_id}")
        return True

    def increment_like(self, recipe_id: int) -> Optional[int]:
        current = self.get_recipe(recipe_id)
        if current is None:
            return None

        new_likes = current.likes + 1
        self._request("PUT", f"{RECIPES_RESOURCE}/{recipe_id}", {"recipe": {"likes": new_likes}})
        logger.info("Recipe %s liked, count is now %d", recipe_id, new_likes)
        return new_likes

    def list_categories(self) -> List[Category]:
        data = self._request("GET", CATEGORIES_RESOURCE) or {}
        return [self._decode("Category row", normalize_category, row) for row in self._rows(data, "categories")]
