"""
GraphQL Mutation Resolvers

Defines the write entry points: creating authors and books.

A record store failure is logged and re-raised as a MutationError, so the
client gets a normal GraphQL response with the failure listed under
`errors` instead of a half-formed Author or Book.
"""

import logging

import strawberry
from strawberry.types import Info

from library_graph.graphql.context import GraphQLContext
from library_graph.graphql.types.author import AuthorType
from library_graph.graphql.types.book import BookType
from library_graph.schemas import AuthorCreate, BookCreate
from library_graph.stores import RecordStoreError

logger = logging.getLogger(__name__)


# =============================================================================
# Error classes for GraphQL
# =============================================================================


class MutationError(Exception):
    """Raised when a mutation could not persist its record."""

    pass


# =============================================================================
# Mutation Type
# =============================================================================


@strawberry.type
class Mutation:
    """GraphQL Mutation type containing all write operations."""

    @strawberry.mutation(description="Create a new author")
    async def add_author(
        self,
        info: Info[GraphQLContext, None],
        name: str,
        age: int,
    ) -> AuthorType:
        fields = AuthorCreate(name=name, age=age)

        try:
            record = await info.context.authors.create(fields)
        except RecordStoreError as exc:
            logger.error(f"addAuthor failed: {exc}")
            raise MutationError(f"Could not add author: {exc}") from exc

        return AuthorType.from_record(record)

    @strawberry.mutation(description="Create a new book")
    async def add_book(
        self,
        info: Info[GraphQLContext, None],
        name: str,
        genre: str,
        author_id: strawberry.ID,
    ) -> BookType:
        """
        Create a book.

        author_id is stored as given; it is not checked against the
        author records.
        """
        fields = BookCreate(name=name, genre=genre, author_id=author_id)

        try:
            record = await info.context.books.create(fields)
        except RecordStoreError as exc:
            logger.error(f"addBook failed: {exc}")
            raise MutationError(f"Could not add book: {exc}") from exc

        return BookType.from_record(record)
