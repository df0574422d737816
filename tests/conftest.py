"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from library_catalog.catalog import BookRecord, Catalog, EntityKind


@pytest.fixture
def catalog() -> Catalog:
    """A freshly seeded catalog, isolated per test."""
    return Catalog.create(seed=True)


@pytest.fixture
def empty_catalog() -> Catalog:
    return Catalog.create(seed=False)


@pytest.fixture
def book_titled(catalog: Catalog) -> Callable[[str], BookRecord]:
    """Look up a seeded book by its title."""

    def find(title: str) -> BookRecord:
        for book in catalog.store.all(EntityKind.BOOK):
            if book.title == title:
                return book
        raise LookupError(title)

    return find


@pytest.fixture
def author_named(catalog: Catalog) -> Callable[[str], Any]:
    def find(name: str):
        for author in catalog.store.all(EntityKind.AUTHOR):
            if author.name == name:
                return author
        raise LookupError(name)

    return find


@pytest.fixture
def mock_info(catalog: Catalog):
    """Create a mock GraphQL info object carrying the catalog."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"catalog": catalog}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
