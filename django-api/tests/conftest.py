"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from bookstore.domain import Date
from bookstore.services import Bookstore, get_bookstore
from bookstore.stores import InMemoryCatalog, InMemoryTransactionLog


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_bookstore():
    get_bookstore.cache_clear()
    yield
    get_bookstore.cache_clear()


@pytest.fixture
def bookstore() -> Bookstore:
    return Bookstore(catalog=InMemoryCatalog(), log=InMemoryTransactionLog())


@pytest.fixture
def book_fields() -> dict:
    return {
        "title": "The Rust Programming Language",
        "author": "Steve Klabnik",
        "genre": "Programming",
        "isbn": "111",
        "publication_date": Date(day=1, month=8, year=2018),
        "price": 3999,
        "quantity": 5,
    }
