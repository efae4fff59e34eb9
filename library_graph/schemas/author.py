"""
Author Pydantic Schemas

AuthorRecord is what every record store returns for an author, whether it
came from the in-memory seed list or from a SQLAlchemy row.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorCreate(BaseModel):
    """
    Fields accepted when creating an author.

    No constraints beyond the types: the addAuthor mutation forwards its
    arguments unchanged.
    """

    name: str = Field(
        ...,
        description="Author's full name",
        examples=["Patrick Rothfuss"],
    )

    age: int = Field(
        ...,
        description="Author's age in years",
        examples=[44],
    )


class AuthorRecord(BaseModel):
    """
    A stored author.

    Every field except id defaults to None, so a record missing a value
    still exposes every declared field.
    """

    id: str = Field(..., description="Opaque identifier")
    name: str | None = None
    age: int | None = None

    model_config = ConfigDict(
        # Build records straight from SQLAlchemy model attributes
        from_attributes=True,
        frozen=True,
    )
