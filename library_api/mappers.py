"""
Entity <-> DTO Mapping

Plain field copying between the ORM models and the API schemas.
No lookups and no rules live here.
"""

from library_api.models import Book, Borrower
from library_api.schemas import BookResponse, BorrowerResponse


def book_from_create(author: str, title: str, isbn: str) -> Book:
    """A new, on-shelf book entity; the id is assigned on save."""
    return Book(author=author, title=title, isbn=isbn)


def borrower_from_create(name: str, email: str) -> Borrower:
    """A new borrower entity holding no books."""
    return Borrower(name=name, email=email)


def book_to_response(book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        author=book.author,
        title=book.title,
        isbn=book.isbn,
        borrowed_by=book.borrower_id,
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


def borrower_to_response(borrower: Borrower) -> BorrowerResponse:
    """The held-book set is rendered as a sorted list of ids."""
    return BorrowerResponse(
        id=borrower.id,
        name=borrower.name,
        email=borrower.email,
        books=sorted(book.id for book in borrower.books),
        created_at=borrower.created_at,
        updated_at=borrower.updated_at,
    )
