"""
Shared fixtures.
"""

import pytest

from fakes import FakeRecipeStore, make_rows
from recipebook.storage import MemoryStorage


@pytest.fixture
def fake_store():
    return FakeRecipeStore(rows=make_rows(3), categories=["Soups", "Desserts"])


@pytest.fixture
def storage():
    return MemoryStorage()
