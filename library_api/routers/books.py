"""
Books Router

Catalog CRUD plus the two lending transitions.

Handlers only unpack the request, call the service and map the result.
Domain errors raised by the services are turned into responses by the
exception handlers registered in main.py.
"""

from typing import List

from fastapi import APIRouter, Request, status

from library_api.config import get_settings
from library_api.dependencies import BookId, BorrowerId, DbSession
from library_api.mappers import book_to_response
from library_api.schemas import BookCreate, BookResponse, BookUpdate, ErrorResponse
from library_api.services import catalog, lending
from library_api.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)


# =============================================================================
# CRUD Endpoints
# =============================================================================

@router.get(
    "/",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get every book in the catalog.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, db: DbSession) -> List[BookResponse]:
    """List all books."""
    return [book_to_response(book) for book in catalog.get_all_books(db)]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_book(request: Request, book_id: BookId, db: DbSession) -> BookResponse:
    """Get a single book by its ID."""
    return book_to_response(catalog.get_book_by_id(db, book_id))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description=(
        "Add a book to the catalog. An ISBN may be reused only with the "
        "same author and title."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        409: {"model": ErrorResponse, "description": "ISBN used with a different title/author"},
    },
)
@limiter.limit(settings.rate_limit_write)
def create_book(request: Request, book_data: BookCreate, db: DbSession) -> BookResponse:
    """
    Create a new book.

    Returns:
        Created book, on the shelf

    Raises:
        ConflictError: 409 if the ISBN is already used with another title/author
    """
    book = catalog.create_book(
        db,
        author=book_data.author,
        title=book_data.title,
        isbn=book_data.isbn,
    )
    return book_to_response(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Overwrite author, title and ISBN. Lending state is untouched.",
    responses={400: {"model": ErrorResponse, "description": "Validation failed"}},
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: BookId,
    book_data: BookUpdate,
    db: DbSession,
) -> BookResponse:
    """Update an existing book."""
    book = catalog.update_book(
        db,
        book_id,
        author=book_data.author,
        title=book_data.title,
        isbn=book_data.isbn,
    )
    return book_to_response(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book, even if it is on loan.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(request: Request, book_id: BookId, db: DbSession) -> None:
    """Delete a book. Returns 204 No Content on success."""
    catalog.delete_book(db, book_id)


# =============================================================================
# Lending Endpoints
# =============================================================================

@router.patch(
    "/{book_id}/borrow/{borrower_id}",
    response_model=BookResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Borrow a book",
    description="Lend an on-shelf book to a borrower.",
    responses={
        409: {"model": ErrorResponse, "description": "Book is already on loan"},
    },
)
@limiter.limit(settings.rate_limit_write)
def borrow_book(
    request: Request,
    book_id: BookId,
    borrower_id: BorrowerId,
    db: DbSession,
) -> BookResponse:
    """Borrow a book; borrowed_by in the response is the borrower's id."""
    return book_to_response(lending.borrow_book(db, book_id, borrower_id))


@router.patch(
    "/{book_id}/return/{borrower_id}",
    response_model=BookResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Return a book",
    description="Return a book to the shelf. Only its current holder may return it.",
    responses={
        409: {"model": ErrorResponse, "description": "Book is not held by this borrower"},
    },
)
@limiter.limit(settings.rate_limit_write)
def return_book(
    request: Request,
    book_id: BookId,
    borrower_id: BorrowerId,
    db: DbSession,
) -> BookResponse:
    """Return a borrowed book."""
    return book_to_response(lending.return_book(db, book_id, borrower_id))
