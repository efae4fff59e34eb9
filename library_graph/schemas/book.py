"""
Book Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict, Field


class BookCreate(BaseModel):
    """
    Fields accepted when creating a book.

    author_id is not checked against existing authors.
    """

    name: str = Field(
        ...,
        description="Book title",
        examples=["Name of the Wind"],
    )

    genre: str = Field(
        ...,
        description="Genre name",
        examples=["Fantasy"],
    )

    author_id: str = Field(
        ...,
        description="Identifier of the book's author",
        examples=["1"],
    )


class BookRecord(BaseModel):
    """A stored book. Missing values default to None."""

    id: str = Field(..., description="Opaque identifier")
    name: str | None = None
    genre: str | None = None
    author_id: str | None = None

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
    )
