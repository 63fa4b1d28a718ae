"""
Catalog Service

Create, read, update and delete books.

ISBN soft-uniqueness
====================
Several books may share an ISBN (multiple copies of one edition), but
only if author and title match exactly. A new book whose ISBN is
already used by a book with a different author or title is rejected.
Edits do not re-check this rule.
"""

import logging

from sqlalchemy.orm import Session

from library_api.exceptions import ConflictError, NotFoundError
from library_api.mappers import book_from_create
from library_api.models import Book
from library_api.repositories import BookRepository
from library_api.validation import validate_book_fields

logger = logging.getLogger(__name__)


def get_book_or_raise(books: BookRepository, book_id: int) -> Book:
    """
    Get a book by ID or raise NotFoundError.

    Raises:
        NotFoundError: if no book has this id
    """
    book = books.find_by_id(book_id)
    if book is None:
        raise NotFoundError(f"Book not found with id: {book_id}")
    return book


def _check_isbn(books: BookRepository, author: str, title: str, isbn: str) -> None:
    for existing in books.find_by_isbn(isbn):
        if existing.author != author or existing.title != title:
            logger.warning(
                f"Book already exists with the same ISBN: {isbn}, "
                f"author: {author}, title: {title}"
            )
            raise ConflictError(
                "Book already exists with the same ISBN but different title/author"
            )


def create_book(db: Session, author: str, title: str, isbn: str) -> Book:
    """
    Add a book to the catalog, on the shelf.

    Args:
        db: Database session
        author: Book author
        title: Book title
        isbn: Book ISBN

    Returns:
        The persisted book with its assigned id

    Raises:
        ValidationFailedError: if any field is blank
        ConflictError: if the ISBN is used by a book with another author/title
    """
    author, title, isbn = validate_book_fields(author, title, isbn)

    books = BookRepository(db)
    _check_isbn(books, author, title, isbn)

    book = books.save(book_from_create(author, title, isbn))
    db.commit()

    logger.info(f"Created book {book.id} (isbn={isbn})")
    return book


def get_all_books(db: Session) -> list[Book]:
    """Return every book in the catalog."""
    return BookRepository(db).find_all()


def get_book_by_id(db: Session, book_id: int) -> Book:
    """Return one book or raise NotFoundError."""
    return get_book_or_raise(BookRepository(db), book_id)


def update_book(db: Session, book_id: int, author: str, title: str, isbn: str) -> Book:
    """
    Overwrite author, title and isbn of an existing book.

    The lending state is left untouched and the ISBN rule is not
    re-applied.

    Raises:
        ValidationFailedError: if any field is blank
        NotFoundError: if the book does not exist
    """
    author, title, isbn = validate_book_fields(author, title, isbn)

    books = BookRepository(db)
    book = get_book_or_raise(books, book_id)

    book.author = author
    book.title = title
    book.isbn = isbn
    books.save(book)
    db.commit()

    return book


def delete_book(db: Session, book_id: int) -> None:
    """
    Permanently remove a book.

    Books on loan may be deleted too. The association lives only in
    the book row, so the borrower's held set loses the book with it.

    Raises:
        NotFoundError: if the book does not exist
    """
    books = BookRepository(db)
    book = get_book_or_raise(books, book_id)

    if book.borrower_id is not None:
        logger.info(f"Deleting book {book_id} while on loan to borrower {book.borrower_id}")

    books.delete(book)
    db.commit()

    logger.info(f"Deleted book {book_id}")
