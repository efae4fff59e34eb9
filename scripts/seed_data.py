#!/usr/bin/env python3
"""
Database Seed Script

Loads the mock authors and books into the database used by the
database record store.

USAGE:
    # From the project root
    RECORD_STORE=database python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Clears existing data (optional)
3. Inserts the mock authors and books, keeping their ids
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.orm import Session

from library_graph.database import SessionLocal, create_tables
from library_graph.models import Author, Book
from library_graph.stores import seed


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.query(Book).delete()
    db.query(Author).delete()
    db.commit()
    print("Data cleared.")


def create_authors(db: Session) -> list[Author]:
    """Insert the mock authors."""
    print("Creating authors...")
    authors = [Author(**data) for data in seed.AUTHORS]
    db.add_all(authors)
    db.commit()
    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session) -> list[Book]:
    """Insert the mock books."""
    print("Creating books...")
    books = [Book(**data) for data in seed.BOOKS]
    db.add_all(books)
    db.commit()
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        authors = create_authors(db)
        books = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
