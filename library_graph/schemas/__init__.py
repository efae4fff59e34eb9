"""
Pydantic Schemas Package

Record shapes exchanged between the record stores and the GraphQL layer.

- *Record: a stored record, as returned by any record store
- *Create: the fields needed to create a record
"""

from library_graph.schemas.author import AuthorCreate, AuthorRecord
from library_graph.schemas.book import BookCreate, BookRecord

__all__ = [
    "AuthorCreate",
    "AuthorRecord",
    "BookCreate",
    "BookRecord",
]
