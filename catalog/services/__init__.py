"""
Services Package

Business logic kept apart from HTTP handling:
- book_store.py: thread-safe in-memory store of books
- sample_data.py: the records a new store is seeded with
- streaming.py: tick source, title-ordered projection and SSE framing
- rate_limiter.py: rate limiting with slowapi
"""
