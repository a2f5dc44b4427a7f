"""
pytest Fixtures for Book Catalog API Tests

Shared fixtures used across all test files.

Every test gets its own seeded BookStore, injected into the app through
dependency overrides, so tests never see each other's writes.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# This disables rate limiting
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from catalog.dependencies import get_book_store, get_stream_interval
from catalog.main import app
from catalog.schemas import Book, Genre
from catalog.services.book_store import BookStore

# Short tick so streaming tests finish quickly
TEST_STREAM_INTERVAL = 0.01


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def book_store() -> BookStore:
    """A store holding the ten sample books."""
    return BookStore.with_sample_data()


@pytest.fixture(scope="function")
def empty_store() -> BookStore:
    """A store with no books."""
    return BookStore()


@pytest.fixture(scope="function")
def client(book_store: BookStore) -> Generator[TestClient, None, None]:
    """
    Create a test client bound to the ``book_store`` fixture.

    The store and the stream interval dependencies are overridden, then
    restored after the test.
    """
    app.dependency_overrides[get_book_store] = lambda: book_store
    app.dependency_overrides[get_stream_interval] = lambda: TEST_STREAM_INTERVAL

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def huckleberry_finn() -> Book:
    """A book that is not part of the sample data."""
    return Book(
        title="The Adventures of Huckleberry Finn",
        author="Mark Twain",
        isbn="9780486280615",
        genre=Genre.FICTION,
        publisher="Dover Publications",
        year_published=1884,
    )


@pytest.fixture
def tom_sawyer() -> Book:
    """Another book that is not part of the sample data."""
    return Book(
        title="The Adventures of Tom Sawyer",
        author="Mark Twain",
        isbn="9780486400778",
        genre=Genre.FICTION,
        publisher="Dover Publications",
        year_published=1876,
    )
