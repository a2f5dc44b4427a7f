"""
Book Streaming

Server-sent events for GET /books/stream.

How a stream works:
===================
1. On subscription, the number of books N is captured once.
2. A tick source fires every ``interval`` seconds, numbering ticks 0, 1, 2...
3. On tick i, the store's current books are sorted by title and the book
   at position i is emitted.
4. After N ticks the stream ends.

The sort runs on every tick against live data, so writes made while a
stream is running are visible to it. If the store shrank so much that
position i no longer exists, the stream stops early instead of failing.

Cancellation: when the client disconnects, Starlette closes the async
generator, which cancels the pending sleep. Nothing else has to be
released.

Usage:
    return StreamingResponse(
        sse_events(stream_books(store, interval=1.0)),
        media_type="text/event-stream",
    )
"""

import asyncio
import logging
from collections.abc import AsyncGenerator, AsyncIterator

from catalog.schemas.book import Book
from catalog.services.book_store import BookStore

logger = logging.getLogger(__name__)


# =============================================================================
# Tick Source
# =============================================================================


async def ticks(interval: float, *, initial_delay: float = 0.0) -> AsyncGenerator[int, None]:
    """
    Yield 0, 1, 2... at a fixed rate.

    Tick i is due ``initial_delay + i * interval`` seconds after the first
    iteration, measured on the event loop clock. A slow consumer delays
    the next tick but does not shift the ones after it.

    Args:
        interval: Seconds between two ticks
        initial_delay: Seconds before tick 0

    Raises:
        ValueError: If interval is not positive
    """
    if interval <= 0:
        raise ValueError("interval must be positive")

    loop = asyncio.get_running_loop()
    start = loop.time() + initial_delay
    index = 0
    while True:
        delay = start + index * interval - loop.time()
        if delay > 0:
            await asyncio.sleep(delay)
        yield index
        index += 1


# =============================================================================
# Projection
# =============================================================================


def stream_books(
    store: BookStore,
    interval: float = 1.0,
    *,
    initial_delay: float = 0.0,
) -> AsyncGenerator[Book, None]:
    """
    Subscribe to the title-ordered book stream.

    The number of events is the store size at the time of this call.
    Each call is an independent subscription starting again at tick 0.

    Args:
        store: Book store to read from
        interval: Seconds between two events
        initial_delay: Seconds before the first event

    Returns:
        Async iterator of books
    """
    total = store.count()
    logger.info(f"Book stream subscribed: {total} events every {interval}s")
    return _project(store, total, interval, initial_delay)


async def _project(
    store: BookStore,
    total: int,
    interval: float,
    initial_delay: float,
) -> AsyncGenerator[Book, None]:
    if total == 0:
        return

    emitted = 0
    source = ticks(interval, initial_delay=initial_delay)
    try:
        async for tick in source:
            books = store.sorted_by_title()
            if tick >= len(books):
                logger.warning(
                    f"Book stream ended early at tick {tick}: "
                    f"only {len(books)} books left"
                )
                return
            yield books[tick]
            emitted += 1
            if emitted >= total:
                break
        logger.info(f"Book stream completed after {emitted} events")
    except asyncio.CancelledError:
        logger.info(f"Book stream cancelled after {emitted} events")
        raise
    finally:
        await source.aclose()


# =============================================================================
# SSE Framing
# =============================================================================


def format_sse(book: Book) -> str:
    """Render one book as an SSE frame: ``data:{json}`` plus a blank line."""
    return f"data:{book.model_dump_json(by_alias=True)}\n\n"


async def sse_events(books: AsyncGenerator[Book, None]) -> AsyncIterator[str]:
    """Turn a book stream into SSE frames, closing it when done."""
    try:
        async for book in books:
            yield format_sse(book)
    finally:
        await books.aclose()
