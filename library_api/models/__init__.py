"""
SQLAlchemy Models Package

Import all models here so that:
1. Alembic can discover them for migrations
2. They're registered with Base.metadata
3. Other modules can import from library_api.models directly
"""

from library_api.models.book import Book
from library_api.models.borrower import Borrower

__all__ = [
    "Book",
    "Borrower",
]
