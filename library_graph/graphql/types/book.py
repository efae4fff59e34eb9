"""
GraphQL Book Type

Defines the Book type and its `author` relationship.

Book and Author refer to each other. Each module names the other type
through strawberry.lazy(), which defers the import until the schema is
built, so neither module has to be imported first.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from library_graph.graphql.context import GraphQLContext
from library_graph.schemas import BookRecord

if TYPE_CHECKING:
    from library_graph.graphql.types.author import AuthorType


@strawberry.type(name="Book")
class BookType:
    """
    GraphQL type representing a book.

    Scalar fields are copied from the BookRecord. The author is only
    looked up when a query selects it.
    """

    id: strawberry.ID
    name: str | None = None
    genre: str | None = None
    author_id: strawberry.ID | None = None

    @classmethod
    def from_record(cls, record: BookRecord) -> "BookType":
        """Convert a stored BookRecord to a GraphQL BookType."""
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            genre=record.genre,
            author_id=(
                strawberry.ID(record.author_id)
                if record.author_id is not None
                else None
            ),
        )

    @strawberry.field(description="The author of this book, or null if unknown")
    async def author(
        self,
        info: Info[GraphQLContext, None],
    ) -> Annotated["AuthorType", strawberry.lazy("library_graph.graphql.types.author")] | None:
        # A dangling or missing author_id is not an error
        if self.author_id is None:
            return None

        record = await info.context.authors.find_by_id(self.author_id)
        if record is None:
            return None

        from library_graph.graphql.types.author import AuthorType

        return AuthorType.from_record(record)

