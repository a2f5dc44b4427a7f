"""
Books Router

CRUD endpoints for the in-memory catalog, plus:
- GET /books/error: always fails, to show how application errors look
- GET /books/stream: one book per tick as server-sent events

Static paths (/error, /stream) are declared before /{isbn} so they are
not captured by the path parameter.
"""

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import StreamingResponse

from catalog.config import get_settings
from catalog.dependencies import BookStoreDep, StreamInterval
from catalog.schemas import Book, ErrorResponse
from catalog.services.rate_limiter import limiter
from catalog.services.streaming import sse_events, stream_books

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
)


@router.get(
    "",
    response_model=list[Book],
    summary="Get all books",
    description="Get all books of the catalog, in no particular order.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, store: BookStoreDep) -> list[Book]:
    """Return every book currently in the store."""
    return store.list_books()


@router.get(
    "/error",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Do something that will most likely generate an error",
    description="Always fails with a structured error and the X-CUSTOM-ERROR header.",
    responses={
        500: {"model": ErrorResponse, "description": "Something bad happened"},
    },
)
@limiter.limit(settings.rate_limit_default)
def generate_error(request: Request, store: BookStoreDep) -> None:
    """
    Trigger the deliberate failure.

    The CustomRuntimeError raised by the store is turned into the
    500 response by the CatalogError handler in catalog.main.
    """
    store.raise_error()


@router.get(
    "/stream",
    response_class=StreamingResponse,
    summary="Stream a book every second",
    description=(
        "Server-sent events: one book per tick in title order, "
        "as many events as there are books when the stream starts."
    ),
    responses={
        200: {
            "content": {"text/event-stream": {}},
            "description": "One book every second",
        },
    },
)
@limiter.limit(settings.rate_limit_default)
async def stream(
    request: Request,
    store: BookStoreDep,
    interval: StreamInterval,
) -> StreamingResponse:
    """
    Stream the catalog, sorted by title, one book per tick.

    Each frame is ``data:{book json}`` followed by a blank line.
    """
    return StreamingResponse(
        sse_events(stream_books(store, interval)),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )


@router.get(
    "/{isbn}",
    response_model=Book,
    summary="Get a book by isbn",
    description="Get a book by isbn.",
    responses={
        404: {"description": "Book is not found"},
    },
)
@limiter.limit(settings.rate_limit_default)
def get_book(request: Request, isbn: str, store: BookStoreDep):
    """
    Get a single book by its ISBN.

    An unknown ISBN gives a 404 with an empty body.
    """
    book = store.get_book(isbn)
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return book


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new book",
    description="Add a new book, or replace the one with the same isbn.",
    responses={
        400: {"description": "Book is invalid"},
    },
)
@limiter.limit(settings.rate_limit_write)
def add_book(request: Request, book: Book, store: BookStoreDep) -> Book:
    """Store the book under its ISBN and return it."""
    return store.upsert_book(book)


@router.patch(
    "/{isbn}",
    response_model=Book,
    summary="Update a book",
    description=(
        "Replace a book. The isbn in the body decides which record is "
        "written; the isbn in the path is informational."
    ),
    responses={
        400: {"description": "Book is invalid"},
    },
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    isbn: str,
    book: Book,
    store: BookStoreDep,
) -> Book:
    """
    Replace (or insert) the book with the body's ISBN.

    A path ISBN that disagrees with the body is logged and ignored.
    """
    if isbn != book.isbn:
        logger.warning(
            f"PATCH /books/{isbn} carries isbn {book.isbn}; storing under {book.isbn}"
        )
    return store.upsert_book(book)


@router.delete(
    "/{isbn}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Delete a book. Deleting an unknown isbn also succeeds.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(request: Request, isbn: str, store: BookStoreDep) -> None:
    """Remove the book; returns 204 No Content whether or not it existed."""
    store.delete_book(isbn)
