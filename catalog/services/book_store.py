"""
In-Memory Book Store

Thread-safe mapping from ISBN to Book.

Route handlers are plain ``def`` functions, so FastAPI runs them in its
threadpool and several of them can touch the store at once. Every
structural access goes through a single ``threading.Lock``; each operation
is atomic for one key and callers never need to lock anything themselves.

Books are frozen pydantic models, so returning the stored instances never
exposes mutable store state.

Usage:
    store = BookStore.with_sample_data()
    store.upsert_book(book)
    store.get_book("9780345339683")
"""

import logging
import threading
from collections.abc import Iterable
from typing import NoReturn

from catalog.exceptions import CustomRuntimeError
from catalog.schemas.book import Book
from catalog.services.sample_data import SAMPLE_BOOKS

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Got some kind of error from somewhere"


class BookStore:
    """
    Owns every book of the catalog.

    Last write wins: two concurrent upserts of the same ISBN both succeed
    and the later one is what remains.
    """

    def __init__(self, initial: Iterable[Book] = ()) -> None:
        self._books: dict[str, Book] = {}
        self._lock = threading.Lock()
        for book in initial:
            self._books[book.isbn] = book

    @classmethod
    def with_sample_data(cls) -> "BookStore":
        """Create a store pre-populated with the ten sample books."""
        return cls(SAMPLE_BOOKS)

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        """Number of books currently stored."""
        with self._lock:
            return len(self._books)

    def list_books(self) -> list[Book]:
        """
        Return every stored book.

        The result is a new list, in no particular order. Later writes are
        not reflected in it.
        """
        with self._lock:
            return list(self._books.values())

    def sorted_by_title(self) -> list[Book]:
        """Snapshot of the store ordered by title (code point order)."""
        return sorted(self.list_books(), key=lambda book: book.title)

    def get_book(self, isbn: str) -> Book | None:
        """Return the book stored under ``isbn``, or None if there is none."""
        with self._lock:
            return self._books.get(isbn)

    def upsert_book(self, book: Book) -> Book:
        """
        Insert ``book``, or replace the one stored under the same ISBN.

        Returns:
            The stored book
        """
        with self._lock:
            replaced = book.isbn in self._books
            self._books[book.isbn] = book
        logger.debug(f"{'Replaced' if replaced else 'Added'} book {book.isbn}")
        return book

    def delete_book(self, isbn: str) -> None:
        """Remove the book stored under ``isbn``. Unknown ISBNs are ignored."""
        with self._lock:
            removed = self._books.pop(isbn, None)
        if removed is not None:
            logger.debug(f"Deleted book {isbn}")

    def clear(self) -> None:
        """Remove every book."""
        with self._lock:
            self._books.clear()

    def raise_error(self) -> NoReturn:
        """
        Fail on purpose.

        Exists to exercise the error reporting of the HTTP layer.

        Raises:
            CustomRuntimeError: always
        """
        raise CustomRuntimeError(ERROR_MESSAGE)
