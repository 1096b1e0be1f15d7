"""Shared test fixtures — small catalogs of named records."""

from operator import itemgetter

import pytest


@pytest.fixture()
def by_name():
    """Key projection for the dict records below."""
    return itemgetter("name")


@pytest.fixture()
def fruit_catalog() -> list[dict]:
    return [
        {"id": 1, "name": "Apple"},
        {"id": 2, "name": "Aple"},
        {"id": 3, "name": "Banana"},
    ]


@pytest.fixture()
def dairy_catalog() -> list[dict]:
    """
    Five records that all qualify for the query "milk" at 0.5:

    milk 1.0, Milk chocolate 0.8, Oat milk 0.8, silk 0.75, mild 0.75.
    """
    return [
        {"id": 1, "name": "Milk chocolate"},
        {"id": 2, "name": "milk"},
        {"id": 3, "name": "Oat milk"},
        {"id": 4, "name": "silk"},
        {"id": 5, "name": "mild"},
        {"id": 6, "name": "Cheddar"},
    ]
