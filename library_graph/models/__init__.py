"""
SQLAlchemy Models Package

Database models backing the database record store.

Model Relationships:
- Author -> Book: One-to-Many through Book.author_id. The column is a
  plain string, not a foreign key, so a book may reference an author
  that does not exist.

Import all models here so Alembic discovers them for migrations.
"""

from library_graph.models.author import Author
from library_graph.models.book import Book

__all__ = [
    "Author",
    "Book",
]
