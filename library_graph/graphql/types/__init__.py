"""
GraphQL Types Package

Types defined here:
- BookType: Book with its author
- AuthorType: Author with their books
"""

from library_graph.graphql.types.author import AuthorType
from library_graph.graphql.types.book import BookType

__all__ = [
    "AuthorType",
    "BookType",
]
