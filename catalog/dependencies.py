"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

The book store is created once per application in create_app() and kept
on ``app.state``. Handlers receive it through ``BookStoreDep``; tests swap
it with ``app.dependency_overrides[get_book_store]``.
"""

from typing import Annotated

from fastapi import Depends, Request

from catalog.services.book_store import BookStore


def get_book_store(request: Request) -> BookStore:
    """Return the store owned by the running application."""
    return request.app.state.book_store


def get_stream_interval(request: Request) -> float:
    """Seconds between two events of the book stream."""
    return request.app.state.stream_interval


# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(store: BookStore = Depends(get_book_store)):
#
# You can write:
#   def list_books(store: BookStoreDep):

BookStoreDep = Annotated[BookStore, Depends(get_book_store)]
StreamInterval = Annotated[float, Depends(get_stream_interval)]
