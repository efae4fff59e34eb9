"""
Book Model

Represents a book in the library database.

The author reference is stored as a plain string column with no
foreign key constraint. Books may be created for authors that do not
(yet) exist; the GraphQL layer resolves such references to null.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from library_graph.database import Base
from library_graph.models.ids import new_record_id


class Book(Base):
    """
    Book model.

    Table: books

    Indexes:
    - author_id: books are looked up by author for Author.books
    """

    __tablename__ = "books"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=new_record_id,
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        index=True,
        nullable=True,
        comment="Book title"
    )

    genre: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Genre name"
    )

    author_id: Mapped[str | None] = mapped_column(
        String(24),
        index=True,
        nullable=True,
        comment="Identifier of the author (not enforced)"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, name={self.name!r})"
