"""
Book Pydantic Schemas

A book is an immutable value: the store hands the same instances to every
caller, so nothing outside an explicit upsert can change a stored record.

JSON uses camelCase for the publication year (``yearPublished``) and the
genre's enumeration name (``"FANTASY"``).
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Genre(StrEnum):
    """Book genres, serialized by name."""

    FANTASY = "FANTASY"
    FICTION = "FICTION"
    SCIENCE_FICTION = "SCIENCE_FICTION"
    ROMANCE = "ROMANCE"
    MYSTERY = "MYSTERY"
    THRILLER = "THRILLER"
    HORROR = "HORROR"
    HISTORICAL_FICTION = "HISTORICAL_FICTION"
    NON_FICTION = "NON_FICTION"
    BIOGRAPHY = "BIOGRAPHY"
    POETRY = "POETRY"


class Book(BaseModel):
    """
    A catalog entry, keyed by ISBN.

    Validation:
    - title must be present and not blank
    - isbn must be present and not blank (it is the store key)

    Equality and hashing compare every field.
    """

    title: str = Field(
        ...,
        description="Book title",
        examples=["The Hobbit"],
    )

    author: str | None = Field(
        default=None,
        description="Author name",
        examples=["J.R.R. Tolkien"],
    )

    isbn: str = Field(
        ...,
        description="ISBN, unique identifier of the book",
        examples=["9780345339683"],
    )

    genre: Genre | None = Field(
        default=None,
        description="Genre name",
        examples=["FANTASY"],
    )

    publisher: str | None = Field(
        default=None,
        description="Publisher name",
        examples=["Houghton Mifflin Harcourt"],
    )

    year_published: int = Field(
        default=0,
        alias="yearPublished",
        description="Year of publication",
        examples=[1937],
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "The Hobbit",
                "author": "J.R.R. Tolkien",
                "isbn": "9780345339683",
                "genre": "FANTASY",
                "publisher": "Houghton Mifflin Harcourt",
                "yearPublished": 1937,
            }
        },
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only titles."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v

    @field_validator("isbn")
    @classmethod
    def isbn_must_not_be_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only ISBNs."""
        if not v.strip():
            raise ValueError("ISBN cannot be empty or whitespace")
        return v
