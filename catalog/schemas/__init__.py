"""
Pydantic Schemas Package

Request/response models of the API. They also serve as the domain values
held by the store: a Book is validated once, at the edge, and then passed
around unchanged.
"""

from catalog.schemas.book import Book, Genre
from catalog.schemas.error import ErrorResponse

__all__ = [
    "Book",
    "Genre",
    "ErrorResponse",
]
