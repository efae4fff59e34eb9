"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Features:
- Book and Author types with lazily resolved relationships
- Query resolvers: book, books, author, authors
- Mutation resolvers: addAuthor, addBook
- Pluggable record stores supplied through the request context

Usage:
    The GraphQL endpoint is available at /graphql, with the GraphiQL
    IDE served on GET when enabled.

Example Query:
    query {
        book(id: "1") {
            name
            genre
            author {
                name
                books { name }
            }
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from library_graph.config import get_settings
from library_graph.graphql.context import get_context
from library_graph.graphql.mutations import Mutation
from library_graph.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    settings = get_settings()
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide_enabled else None,
    )


__all__ = ["schema", "create_graphql_router"]
