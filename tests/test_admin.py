"""
Tests for the admin dashboard view model.

These tests verify that:
- Both collections load, and one failing does not block the other
- Required fields are checked before any network call
- Create/update/delete merge the server's answer into the local list
- Failed mutations reload both collections
- Only one mutation runs at a time
"""

from unittest.mock import Mock

import pytest
import requests

from fakes import FakeRecipeStore, make_response, make_rows
from recipebook.admin import AdminModel
from recipebook.models import RecipeForm
from recipebook.store.sheety import SheetyStore

VALID_FORM = {
    "title": "Pão de Ló",
    "image_url": "https://img.example/pao.jpg",
    "prep_time_label": "1 h",
    "ingredients": "eggs\nsugar\nflour",
    "instructions": "whisk\nbake",
    "category_selector": "Desserts",
}


@pytest.fixture
def admin(fake_store):
    model = AdminModel(fake_store)
    model.load()
    fake_store.calls.clear()
    return model


class TestLoad:
    """Concurrent fetch of recipes and categories."""

    def test_loads_both_collections(self, fake_store):
        model = AdminModel(fake_store)
        assert model.loading is True

        model.load()

        assert model.loading is False
        assert [r.title for r in model.recipes] == ["R1", "R2", "R3"]
        assert model.category_names == ["Soups", "Desserts"]
        assert sorted(fake_store.calls) == ["list_categories", "list_recipes"]

    def test_one_failing_collection_loads_as_empty(self, fake_store):
        fake_store.failing.add("list_categories")
        model = AdminModel(fake_store)

        model.load()

        assert len(model.recipes) == 3
        assert model.categories == []
        assert model.loading is False


class TestForm:
    """Create and edit modes."""

    def test_starts_in_create_mode(self, admin):
        assert admin.is_editing is False
        assert admin.form == RecipeForm()

    def test_open_edit_copies_recipe(self, admin):
        recipe = admin.recipes[1]

        admin.open_edit(recipe)

        assert admin.is_editing is True
        assert admin.editing_id == recipe.id
        assert admin.form.title == "R2"
        assert admin.form.category_selector == "Soups"

    def test_close_form_clears_buffer(self, admin):
        admin.open_edit(admin.recipes[0])

        admin.close_form()

        assert admin.is_editing is False
        assert admin.form == RecipeForm()

    def test_update_form(self, admin):
        admin.update_form(title="Soup", category_selector="Soups")
        assert admin.form.title == "Soup"
        assert admin.form.category_selector == "Soups"


class TestSubmit:
    """Create and update."""

    def test_missing_title_makes_no_network_call(self, admin):
        admin.update_form(**{**VALID_FORM, "title": ""})

        assert admin.submit() is False
        assert admin.store.calls == []
        assert admin.form.image_url == VALID_FORM["image_url"]

    @pytest.mark.parametrize("field", ["image_url", "category_selector"])
    def test_other_required_fields(self, admin, field):
        admin.update_form(**{**VALID_FORM, field: "   "})

        assert admin.submit() is False
        assert admin.store.calls == []

    def test_create_appends_with_zero_likes(self, admin, fake_store):
        admin.open_create()
        admin.update_form(likes=40, **VALID_FORM)

        assert admin.submit() is True

        created = admin.recipes[-1]
        assert created.title == "Pão de Ló"
        assert created.likes == 0
        assert fake_store.rows[created.id].likes == 0
        assert len(admin.recipes) == 4
        assert admin.form == RecipeForm()

    def test_update_replaces_by_id(self, admin, fake_store):
        target = admin.recipes[1]
        admin.open_edit(target)
        admin.update_form(title="Renamed")

        assert admin.submit() is True

        assert fake_store.calls == ["update_recipe"]
        assert [r.title for r in admin.recipes] == ["R1", "Renamed", "R3"]
        assert admin.recipes[1].likes == target.likes
        assert admin.is_editing is False

    def test_failed_save_reloads(self, admin, fake_store):
        fake_store.failing.add("create_recipe")
        admin.update_form(**VALID_FORM)

        assert admin.submit() is False

        assert fake_store.calls[0] == "create_recipe"
        assert sorted(fake_store.calls[1:]) == ["list_categories", "list_recipes"]
        assert len(admin.recipes) == 3
        assert admin.saving is False
        # The buffer is kept so the admin can retry
        assert admin.form.title == VALID_FORM["title"]

    def test_saving_guard(self, admin, fake_store):
        admin.update_form(**VALID_FORM)
        admin.saving = True

        assert admin.submit() is False
        assert admin.delete(2) is False
        assert fake_store.calls == []


class TestDelete:
    """Removing recipes."""

    def test_delete_only_removes_that_recipe(self, admin, fake_store):
        before = {r.id: r for r in admin.recipes}

        assert admin.delete(3) is True

        assert [r.id for r in admin.recipes] == [2, 4]
        assert 3 not in fake_store.rows
        for recipe in admin.recipes:
            assert recipe == before[recipe.id]

    def test_failed_delete_reloads(self, admin, fake_store):
        fake_store.failing.add("delete_recipe")

        assert admin.delete(3) is False

        assert fake_store.calls[0] == "delete_recipe"
        assert sorted(fake_store.calls[1:]) == ["list_categories", "list_recipes"]
        assert [r.id for r in admin.recipes] == [2, 3, 4]


class TestStats:
    """Dashboard totals."""

    def test_totals(self, admin):
        assert admin.stats() == {"recipes": 3, "categories": 2, "likes": 6}

    def test_empty(self):
        model = AdminModel(FakeRecipeStore())
        model.load()
        assert model.stats() == {"recipes": 0, "categories": 0, "likes": 0}

    def test_follows_mutations(self, admin):
        admin.delete(4)
        assert admin.stats()["likes"] == 3

    def test_large_collection(self):
        model = AdminModel(FakeRecipeStore(rows=make_rows(10)))
        model.load()
        assert model.stats()["likes"] == 55


class TestAgainstSheetyStore:
    """Admin model over the real adapter with a mocked session."""

    @staticmethod
    def sheety_store(post_body):
        rows = {"recipes": make_rows(2)}
        categories = {"categories": [{"id": 2, "name": "Soups"}]}

        def respond(method, url, json=None, timeout=None):
            if method == "POST":
                body = post_body
            elif url.endswith("/categories"):
                body = categories
            else:
                body = rows
            return make_response(body=body)

        session = requests.Session()
        session.request = Mock(side_effect=respond)
        return SheetyStore("https://api.sheety.example/abc/recipebook", session=session), session.request

    def test_create_without_echoed_record_adds_no_row(self):
        store, request = self.sheety_store(post_body={})
        model = AdminModel(store)
        model.load()
        model.update_form(**VALID_FORM)

        assert model.submit() is False

        assert [r.id for r in model.recipes] == [2, 3]
        assert all(r.id is not None for r in model.recipes)
        methods = [c[0][0] for c in request.call_args_list]
        assert methods.count("POST") == 1
        assert methods.count("GET") == 4

    def test_malformed_collection_loads_as_empty(self):
        store, _ = self.sheety_store(post_body={})
        store._session.request.side_effect = lambda method, url, **kwargs: make_response(body=["not", "an", "object"])
        model = AdminModel(store)

        model.load()

        assert model.recipes == []
        assert model.categories == []
        assert model.loading is False
