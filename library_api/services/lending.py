"""
Lending Service

The borrow/return state machine.

States:
    On-Shelf  book.borrower_id is NULL
    On-Loan   book.borrower_id points at exactly one borrower

Transitions:
    On-Shelf --borrow(borrower)--> On-Loan(borrower)
    On-Loan(borrower) --return(same borrower)--> On-Shelf

There is no direct On-Loan(A) -> On-Loan(B) transition: a book held
by A must be returned before B can borrow it.

Both sides of the association (book.borrowed_by and borrower.books)
are updated together and committed in one transaction. The book and
borrower rows are read with FOR UPDATE so two concurrent borrows of
the same book serialize on databases that support row locks.
"""

import logging

from sqlalchemy.orm import Session

from library_api.exceptions import ConflictError, NotFoundError
from library_api.models import Book
from library_api.repositories import BookRepository, BorrowerRepository

logger = logging.getLogger(__name__)


def borrow_book(db: Session, book_id: int, borrower_id: int) -> Book:
    """
    Lend a book to a borrower.

    Args:
        db: Database session
        book_id: Book to lend
        borrower_id: Borrower taking the book

    Returns:
        The book, now on loan to the borrower

    Raises:
        NotFoundError: if the book or the borrower does not exist
        ConflictError: if the book is already held by this or another borrower
    """
    books = BookRepository(db)
    borrowers = BorrowerRepository(db)

    book = books.find_by_id(book_id, for_update=True)
    if book is None:
        raise NotFoundError("Book does not exist")

    borrower = borrowers.find_by_id(borrower_id, for_update=True)
    if borrower is None:
        raise NotFoundError("Borrower does not exist")

    if book in borrower.books:
        logger.warning(
            f"Book is already borrowed by the given borrower, "
            f"bookId: {book_id}, borrowerId: {borrower_id}"
        )
        raise ConflictError("Book is already borrowed by the borrower")

    if book.borrower_id is not None:
        logger.warning(
            f"Book is on loan to another borrower, bookId: {book_id}, "
            f"holderId: {book.borrower_id}, requestedBy: {borrower_id}"
        )
        raise ConflictError("Book is already borrowed by another borrower")

    book.borrowed_by = borrower
    borrower.books.add(book)
    borrowers.save(borrower)
    books.save(book)
    db.commit()

    logger.info(f"Book {book_id} borrowed by borrower {borrower_id}")
    return book


def return_book(db: Session, book_id: int, borrower_id: int) -> Book:
    """
    Take a book back from the borrower holding it.

    Args:
        db: Database session
        book_id: Book being returned
        borrower_id: Borrower returning it

    Returns:
        The book, back on the shelf

    Raises:
        NotFoundError: if the book or the borrower does not exist
        ConflictError: if the borrower does not hold this book
    """
    books = BookRepository(db)
    borrowers = BorrowerRepository(db)

    book = books.find_by_id(book_id, for_update=True)
    if book is None:
        raise NotFoundError("Book does not exist")

    borrower = borrowers.find_by_id(borrower_id, for_update=True)
    if borrower is None:
        raise NotFoundError("Borrower does not borrow this book")

    if book not in borrower.books:
        logger.warning(
            f"Book is not borrowed by the given borrower, "
            f"bookId: {book_id}, borrowerId: {borrower_id}"
        )
        raise ConflictError("Book is not borrowed by the given borrower")

    book.borrowed_by = None
    borrower.books.discard(book)
    borrowers.save(borrower)
    books.save(book)
    db.commit()

    logger.info(f"Book {book_id} returned by borrower {borrower_id}")
    return book
