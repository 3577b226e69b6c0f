"""
Tests for the Sheety store using a mocked requests session.

These tests replace Session.request so no real HTTP calls are made. They verify that:
- Request paths, methods and bodies follow the Sheety contract
- Responses are normalized into the UI shape
- Create always sends likes = 0
- Missing records come back as None
- Network and HTTP failures and malformed bodies surface as TransportError
"""

from unittest.mock import Mock

import pytest
import requests
from pydantic import ValidationError

from fakes import make_response
from recipebook.models import RecipeForm
from recipebook.store.base import TransportError
from recipebook.store.sheety import SheetyStore

BASE_URL = "https://api.sheety.example/abc/recipebook"


def make_store(*responses, token=None):
    session = requests.Session()
    session.request = Mock(side_effect=list(responses))
    store = SheetyStore(BASE_URL + "/", token=token, timeout=5, session=session)
    return store, session.request


def sent_body(request_mock, call_index=-1):
    return request_mock.call_args_list[call_index][1]["json"]


ROW = {
    "id": 2,
    "title": "Caldo Verde",
    "image": "https://img.example/caldo.jpg",
    "prep_time": "40 min",
    "ingredients": "potatoes\nkale",
    "instructions": "boil\nserve",
    "likes": 4,
    "category": "Soups",
}


class TestSheetyStoreSetup:
    """Session configuration."""

    def test_trailing_slash_is_removed(self):
        store, _ = make_store()
        assert store.base_url == BASE_URL

    def test_bearer_token_header(self):
        store, _ = make_store(token="secret")
        assert store._session.headers["Authorization"] == "Bearer secret"

    def test_no_authorization_header_without_token(self):
        store, _ = make_store()
        assert "Authorization" not in store._session.headers


class TestSheetyStoreReads:
    """list_recipes, get_recipe, list_categories."""

    def test_list_recipes_normalizes_in_server_order(self):
        second = {**ROW, "id": 3, "title": "Arroz Doce", "image": None}
        store, request = make_store(make_response(body={"recipes": [second, ROW]}))

        recipes = store.list_recipes()

        request.assert_called_once_with("GET", f"{BASE_URL}/recipes", json=None, timeout=5)
        assert [r.id for r in recipes] == [3, 2]
        assert recipes[0].image_url == ""
        assert recipes[1].prep_time_label == "40 min"
        assert recipes[1].category_selector == "Soups"

    def test_list_recipes_with_missing_key_is_empty(self):
        store, _ = make_store(make_response(body={}))
        assert store.list_recipes() == []

    def test_get_recipe_found(self):
        store, request = make_store(make_response(body={"recipe": ROW}))

        recipe = store.get_recipe(2)

        assert request.call_args[0] == ("GET", f"{BASE_URL}/recipes/2")
        assert recipe.title == "Caldo Verde"
        assert recipe.likes == 4

    def test_get_recipe_404_is_none(self):
        store, _ = make_store(make_response(404, {"errors": [{"detail": "No rows found for id 99"}]}))
        assert store.get_recipe(99) is None

    def test_get_recipe_without_record_is_none(self):
        store, _ = make_store(make_response(body={}))
        assert store.get_recipe(99) is None

    def test_list_categories(self):
        store, request = make_store(make_response(body={"categories": [{"id": 2, "name": "Soups"}]}))

        categories = store.list_categories()

        assert request.call_args[0] == ("GET", f"{BASE_URL}/categories")
        assert categories[0].name == "Soups"

    def test_list_categories_keeps_server_order(self):
        body = {"categories": [{"id": 3, "name": "Desserts"}, {"id": 2, "name": "Soups"}]}
        store, _ = make_store(make_response(body=body))

        assert [c.name for c in store.list_categories()] == ["Desserts", "Soups"]


class TestSheetyStoreWrites:
    """create_recipe, update_recipe, delete_recipe."""

    def test_create_forces_likes_to_zero(self):
        created = {**ROW, "id": 9, "likes": 0}
        store, request = make_store(make_response(body={"recipe": created}))
        form = RecipeForm(
            title="Caldo Verde",
            image_url="https://img.example/caldo.jpg",
            category_selector="Soups",
            likes=57,
        )

        recipe = store.create_recipe(form)

        assert request.call_args[0] == ("POST", f"{BASE_URL}/recipes")
        body = sent_body(request)
        assert body["recipe"]["likes"] == 0
        assert body["recipe"]["category"] == "Soups"
        assert body["recipe"]["image"] == "https://img.example/caldo.jpg"
        assert "id" not in body["recipe"]
        assert recipe.id == 9
        assert recipe.likes == 0

    def test_update_sends_form_fields_without_likes(self):
        store, request = make_store(make_response(body={"recipe": {**ROW, "title": "Sopa"}}))
        form = RecipeForm(title="Sopa", image_url="https://img", category_selector="Soups", likes=100)

        recipe = store.update_recipe(2, form)

        assert request.call_args[0] == ("PUT", f"{BASE_URL}/recipes/2")
        assert "likes" not in sent_body(request)["recipe"]
        assert recipe.title == "Sopa"
        assert recipe.likes == 4

    def test_update_keeps_id_when_server_omits_it(self):
        echoed = {k: v for k, v in ROW.items() if k != "id"}
        store, _ = make_store(make_response(body={"recipe": echoed}))

        recipe = store.update_recipe(2, RecipeForm(title="Caldo Verde"))

        assert recipe.id == 2

    @pytest.mark.parametrize("body", [None, {}, {"recipe": {}}, {"recipe": {"title": "Caldo Verde"}}])
    def test_create_without_echoed_record_raises(self, body):
        store, _ = make_store(make_response(body=body))

        with pytest.raises(TransportError):
            store.create_recipe(RecipeForm(title="Caldo Verde", image_url="https://img", category_selector="Soups"))

    def test_delete_with_empty_body(self):
        store, request = make_store(make_response(204))

        assert store.delete_recipe(2) is True
        assert request.call_args[0] == ("DELETE", f"{BASE_URL}/recipes/2")

    def test_delete_failure_raises(self):
        store, _ = make_store(make_response(500, {"errors": []}))

        with pytest.raises(TransportError) as excinfo:
            store.delete_recipe(2)
        assert excinfo.value.status_code == 500


class TestSheetyStoreLikes:
    """increment_like read-modify-write."""

    def test_increment_like_reads_then_writes_only_likes(self):
        store, request = make_store(
            make_response(body={"recipe": ROW}),
            make_response(body={"recipe": {**ROW, "likes": 5}}),
        )

        assert store.increment_like(2) == 5

        assert request.call_count == 2
        assert request.call_args_list[0][0] == ("GET", f"{BASE_URL}/recipes/2")
        assert request.call_args_list[1][0] == ("PUT", f"{BASE_URL}/recipes/2")
        assert sent_body(request) == {"recipe": {"likes": 5}}

    def test_increment_like_treats_missing_count_as_zero(self):
        row = {k: v for k, v in ROW.items() if k != "likes"}
        store, request = make_store(make_response(body={"recipe": row}), make_response(body={}))

        assert store.increment_like(2) == 1
        assert sent_body(request) == {"recipe": {"likes": 1}}

    def test_increment_like_on_missing_recipe(self):
        store, request = make_store(make_response(404, {"errors": []}))

        assert store.increment_like(99) is None
        assert request.call_count == 1


class TestSheetyStoreErrors:
    """Transport failures."""

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
    ])
    def test_network_errors_become_transport_errors(self, error):
        store, _ = make_store(error)

        with pytest.raises(TransportError) as excinfo:
            store.list_recipes()
        assert isinstance(excinfo.value.__cause__, requests.exceptions.RequestException)

    def test_http_error_carries_status_code(self):
        store, _ = make_store(make_response(503, {"errors": []}))

        with pytest.raises(TransportError) as excinfo:
            store.list_categories()
        assert excinfo.value.status_code == 503

    def test_get_recipe_server_error_is_not_treated_as_missing(self):
        store, _ = make_store(make_response(500, {"errors": []}))

        with pytest.raises(TransportError):
            store.get_recipe(2)

    def test_invalid_json_body(self):
        response = make_response(200)
        response._content = b"<html>rate limited</html>"
        store, _ = make_store(response)

        with pytest.raises(TransportError):
            store.list_recipes()

    @pytest.mark.parametrize("body", [["not", "an", "object"], "text", 42])
    def test_body_that_is_not_an_object(self, body):
        store, _ = make_store(make_response(body=body))

        with pytest.raises(TransportError):
            store.list_recipes()

    def test_rejected_recipe_row(self):
        store, _ = make_store(make_response(body={"recipes": [{"id": 2, "likes": "lots"}]}))

        with pytest.raises(TransportError) as excinfo:
            store.list_recipes()
        assert isinstance(excinfo.value.__cause__, ValidationError)

    def test_rejected_single_recipe(self):
        store, _ = make_store(make_response(body={"recipe": {"id": "two"}}))

        with pytest.raises(TransportError):
            store.get_recipe(2)

    def test_collection_that_is_not_a_list(self):
        store, _ = make_store(make_response(body={"categories": 7}))

        with pytest.raises(TransportError):
            store.list_categories()

    def test_rejected_category_row(self):
        store, _ = make_store(make_response(body={"categories": [{"id": "x", "name": "Soups"}]}))

        with pytest.raises(TransportError):
            store.list_categories()
