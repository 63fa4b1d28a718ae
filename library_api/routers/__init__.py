"""
API Routers Package

Router Structure:
- books.py: /api/v1/books/* endpoints (catalog + borrow/return)
- borrowers.py: /api/v1/borrowers/* endpoints

Each router is imported and registered in main.py.
"""

from library_api.routers.books import router as books_router
from library_api.routers.borrowers import router as borrowers_router

__all__ = [
    "books_router",
    "borrowers_router",
]
