#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample data for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Clears existing data
3. Registers sample borrowers and catalogs sample books
4. Lends one book so both lending states are present
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.models import Book, Borrower
from library_api.services import catalog, lending, registration

BOOKS = [
    {"author": "George Orwell", "title": "1984", "isbn": "9780451524935"},
    # Second copy of the same edition
    {"author": "George Orwell", "title": "1984", "isbn": "9780451524935"},
    {"author": "George Orwell", "title": "Animal Farm", "isbn": "9780451526342"},
    {"author": "Jane Austen", "title": "Pride and Prejudice", "isbn": "9780141439518"},
    {"author": "Harper Lee", "title": "To Kill a Mockingbird", "isbn": "9780061120084"},
]

BORROWERS = [
    {"name": "Ada Lovelace", "email": "ada@example.com"},
    {"name": "Alan Turing", "email": "alan@example.com"},
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Borrower))
    db.commit()
    print("Data cleared.")


def create_borrowers(db: Session) -> list[Borrower]:
    print("Registering borrowers...")
    borrowers = [registration.create_borrower(db, **data) for data in BORROWERS]
    for borrower in borrowers:
        print(f"  Registered: {borrower.name}")
    return borrowers


def create_books(db: Session) -> list[Book]:
    print("Cataloging books...")
    books = [catalog.create_book(db, **data) for data in BOOKS]
    for book in books:
        print(f"  Cataloged: {book.title} ({book.isbn})")
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

        borrowers = create_borrowers(db)
        books = create_books(db)

        lent = lending.borrow_book(db, books[0].id, borrowers[0].id)
        print(f"  Lent '{lent.title}' to {borrowers[0].name}")

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Borrowers: {len(borrowers)}")
        print(f"  - Books: {len(books)}")
        print("\nAPI documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
