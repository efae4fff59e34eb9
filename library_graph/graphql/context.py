"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- books: record store for Book records
- authors: record store for Author records

The context is created fresh for each GraphQL request and passed to all
resolvers via the `info` parameter. Which backend the stores use is
decided by get_record_stores(), not by the resolvers.
"""

from strawberry.fastapi import BaseContext

from library_graph.dependencies import RecordStoresDep
from library_graph.schemas import AuthorRecord, BookRecord
from library_graph.stores import RecordStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Attributes:
        books: Book record store
        authors: Author record store
    """

    def __init__(
        self,
        books: RecordStore[BookRecord],
        authors: RecordStore[AuthorRecord],
    ):
        super().__init__()
        self.books = books
        self.authors = authors


async def get_context(stores: RecordStoresDep) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Strawberry resolves FastAPI dependencies declared on the context
    getter, so the stores come from get_record_stores().
    """
    return GraphQLContext(books=stores.books, authors=stores.authors)
