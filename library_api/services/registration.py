"""
Registration Service

Create, read, update and delete borrowers.

Names and emails are unique. The check happens here, before the
write, so a duplicate is reported as a ConflictError naming the field.
The unique constraints in the database remain as the last line.
"""

import logging

from sqlalchemy.orm import Session

from library_api.exceptions import ConflictError, NotFoundError
from library_api.mappers import borrower_from_create
from library_api.models import Borrower
from library_api.repositories import BorrowerRepository
from library_api.validation import validate_borrower_fields

logger = logging.getLogger(__name__)


def get_borrower_or_raise(borrowers: BorrowerRepository, borrower_id: int) -> Borrower:
    """
    Get a borrower by ID or raise NotFoundError.

    Raises:
        NotFoundError: if no borrower has this id
    """
    borrower = borrowers.find_by_id(borrower_id)
    if borrower is None:
        raise NotFoundError(f"Borrower not found with id: {borrower_id}")
    return borrower


def _check_unique(
    borrowers: BorrowerRepository,
    name: str,
    email: str,
    exclude_id: int | None = None,
) -> None:
    """Raise ConflictError if another borrower already uses name or email."""
    same_name = borrowers.find_by_name(name)
    if same_name is not None and same_name.id != exclude_id:
        logger.warning(f"Borrower already exists with name: {name}")
        raise ConflictError("Borrower already exists with the same name")

    same_email = borrowers.find_by_email(email)
    if same_email is not None and same_email.id != exclude_id:
        logger.warning(f"Borrower already exists with email: {email}")
        raise ConflictError("Borrower already exists with the same email")


def create_borrower(db: Session, name: str, email: str) -> Borrower:
    """
    Register a new borrower holding no books.

    Raises:
        ValidationFailedError: if name is blank or email is blank/malformed
        ConflictError: if name or email is already registered
    """
    name, email = validate_borrower_fields(name, email)

    borrowers = BorrowerRepository(db)
    _check_unique(borrowers, name, email)

    borrower = borrowers.save(borrower_from_create(name, email))
    db.commit()

    logger.info(f"Created borrower {borrower.id}")
    return borrower


def get_all_borrowers(db: Session) -> list[Borrower]:
    """Return every registered borrower."""
    return BorrowerRepository(db).find_all()


def get_borrower_by_id(db: Session, borrower_id: int) -> Borrower:
    """Return one borrower or raise NotFoundError."""
    return get_borrower_or_raise(BorrowerRepository(db), borrower_id)


def update_borrower(db: Session, borrower_id: int, name: str, email: str) -> Borrower:
    """
    Overwrite name and email of an existing borrower.

    Raises:
        ValidationFailedError: if name is blank or email is blank/malformed
        NotFoundError: if the borrower does not exist
        ConflictError: if another borrower already uses name or email
    """
    name, email = validate_borrower_fields(name, email)

    borrowers = BorrowerRepository(db)
    borrower = get_borrower_or_raise(borrowers, borrower_id)
    _check_unique(borrowers, name, email, exclude_id=borrower_id)

    borrower.name = name
    borrower.email = email
    borrowers.save(borrower)
    db.commit()

    return borrower


def delete_borrower(db: Session, borrower_id: int) -> None:
    """
    Remove a borrower.

    Held books stay in the catalog and go back on the shelf: the ORM
    nulls their borrower_id as part of the delete.

    Raises:
        NotFoundError: if the borrower does not exist
    """
    borrowers = BorrowerRepository(db)
    borrower = get_borrower_or_raise(borrowers, borrower_id)

    released = len(borrower.books)
    borrowers.delete(borrower)
    db.commit()

    logger.info(f"Deleted borrower {borrower_id}, released {released} book(s)")
