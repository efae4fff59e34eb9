"""
Author Model

Represents an author in the library database.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from library_graph.database import Base
from library_graph.models.ids import new_record_id


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Books are not mapped as a relationship; they are looked up by
    Book.author_id when a client asks for them.

    Example:
        author = Author(name="Patrick Rothfuss", age=44)
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    # Opaque string identifier, generated on insert
    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=new_record_id,
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        index=True,
        nullable=True,
        comment="Author's full name"
    )

    age: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Author's age in years"
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id!r}, name={self.name!r})"
