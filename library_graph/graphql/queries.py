"""
GraphQL Query Resolvers

Defines the read entry points into the graph. Each resolver is a pass
through to the record stores in the request context.
"""

import strawberry
from strawberry.types import Info

from library_graph.graphql.context import GraphQLContext
from library_graph.graphql.types.author import AuthorType
from library_graph.graphql.types.book import BookType


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    Single lookups return null on a miss; list lookups return an empty
    list when the store is empty.
    """

    @strawberry.field(description="Get a single book by ID")
    async def book(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID | None = None,
    ) -> BookType | None:
        # No id is a lookup miss, not a validation error
        if id is None:
            return None

        record = await info.context.books.find_by_id(id)
        if record is None:
            return None
        return BookType.from_record(record)

    @strawberry.field(description="Get every book")
    async def books(self, info: Info[GraphQLContext, None]) -> list[BookType]:
        records = await info.context.books.find()
        return [BookType.from_record(record) for record in records]

    @strawberry.field(description="Get a single author by ID")
    async def author(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID | None = None,
    ) -> AuthorType | None:
        if id is None:
            return None

        record = await info.context.authors.find_by_id(id)
        if record is None:
            return None
        return AuthorType.from_record(record)

    @strawberry.field(description="Get every author")
    async def authors(self, info: Info[GraphQLContext, None]) -> list[AuthorType]:
        records = await info.context.authors.find()
        return [AuthorType.from_record(record) for record in records]
