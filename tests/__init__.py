"""
Test Suite for Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (fresh store, test client, sample books)
- test_books.py: Tests for the /books CRUD endpoints
- test_book_store.py: Unit and concurrency tests for the store
- test_streaming.py: Tick source, projection and /books/stream
- test_errors.py: Error endpoint and exception handler
- test_app.py: Root, health, factory and settings

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_streaming.py

    # Run with verbose output
    pytest -v
"""
