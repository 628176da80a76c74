"""
Pydantic models for book data.

``BookRead`` is the record kept by the store and returned by the API.
The request models deliberately leave every field optional: the
presence rules differ between create (title and author), full replace
(all four fields) and partial update (nothing required), and they are
enforced by ``BookService`` so that a missing field produces the
playground's own 400 response with a hint instead of a generic
validation error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class BookRead(BaseModel):
    """Schema for a stored book."""

    id: int
    title: str = Field(..., example="The API Design Book")
    author: str = Field(..., example="RESTful Roy")
    year: int = Field(..., example=2020)
    genre: str = Field(..., example="Technology")


class BookCreate(BaseModel):
    """Schema for ``POST /api/books``; ``title`` and ``author`` are required."""

    title: Optional[str] = Field(None, example="Learning APIs the Fun Way")
    author: Optional[str] = Field(None, example="You, the Learner")
    year: Optional[int] = Field(None, example=2024)
    genre: Optional[str] = Field(None, example="Education")


class BookReplace(BookCreate):
    """Schema for ``PUT /api/books/{id}``; every field is required."""

    pass


class BookUpdate(BaseModel):
    """Schema for ``PATCH /api/books/{id}``.

    All fields are optional; only provided values will be updated.  An
    ``id`` in the payload is not part of the schema and is dropped.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
