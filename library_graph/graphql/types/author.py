"""
GraphQL Author Type

Defines the Author type and its `books` relationship.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from library_graph.graphql.context import GraphQLContext
from library_graph.schemas import AuthorRecord

if TYPE_CHECKING:
    from library_graph.graphql.types.book import BookType


@strawberry.type(name="Author")
class AuthorType:
    """
    GraphQL type representing a book author.

    Books are found by matching Book.author_id against this author's id,
    with a fresh store lookup each time the field is selected.
    """

    id: strawberry.ID
    name: str | None = None
    age: int | None = None

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "AuthorType":
        """Convert a stored AuthorRecord to a GraphQL AuthorType."""
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            age=record.age,
        )

    @strawberry.field(description="Books written by this author")
    async def books(
        self,
        info: Info[GraphQLContext, None],
    ) -> list[Annotated["BookType", strawberry.lazy("library_graph.graphql.types.book")]]:
        from library_graph.graphql.types.book import BookType

        records = await info.context.books.find(author_id=self.id)
        return [BookType.from_record(record) for record in records]

