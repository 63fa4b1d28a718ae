"""
Borrowers Router

CRUD endpoints for borrowers.
Follows the same patterns as the books router.
"""

from typing import List

from fastapi import APIRouter, Request, status

from library_api.config import get_settings
from library_api.dependencies import BorrowerId, DbSession
from library_api.mappers import borrower_to_response
from library_api.schemas import (
    BorrowerCreate,
    BorrowerResponse,
    BorrowerUpdate,
    ErrorResponse,
)
from library_api.services import registration
from library_api.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/borrowers",
    tags=["Borrowers"],
    responses={
        404: {"model": ErrorResponse, "description": "Borrower not found"},
    },
)


@router.get(
    "/",
    response_model=List[BorrowerResponse],
    summary="List all borrowers",
)
@limiter.limit(settings.rate_limit_default)
def list_borrowers(request: Request, db: DbSession) -> List[BorrowerResponse]:
    """List all borrowers."""
    return [borrower_to_response(b) for b in registration.get_all_borrowers(db)]


@router.get(
    "/{borrower_id}",
    response_model=BorrowerResponse,
    summary="Get a borrower by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_borrower(request: Request, borrower_id: BorrowerId, db: DbSession) -> BorrowerResponse:
    """Get a single borrower, including the ids of held books."""
    return borrower_to_response(registration.get_borrower_by_id(db, borrower_id))


@router.post(
    "/",
    response_model=BorrowerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a borrower",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        409: {"model": ErrorResponse, "description": "Name or email already registered"},
    },
)
@limiter.limit(settings.rate_limit_write)
def create_borrower(
    request: Request,
    borrower_data: BorrowerCreate,
    db: DbSession,
) -> BorrowerResponse:
    """Register a new borrower."""
    borrower = registration.create_borrower(
        db,
        name=borrower_data.name,
        email=borrower_data.email,
    )
    return borrower_to_response(borrower)


@router.put(
    "/{borrower_id}",
    response_model=BorrowerResponse,
    summary="Update a borrower",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        409: {"model": ErrorResponse, "description": "Name or email already registered"},
    },
)
@limiter.limit(settings.rate_limit_write)
def update_borrower(
    request: Request,
    borrower_id: BorrowerId,
    borrower_data: BorrowerUpdate,
    db: DbSession,
) -> BorrowerResponse:
    """Update an existing borrower."""
    borrower = registration.update_borrower(
        db,
        borrower_id,
        name=borrower_data.name,
        email=borrower_data.email,
    )
    return borrower_to_response(borrower)


@router.delete(
    "/{borrower_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a borrower",
    description="Delete a borrower. Books they hold go back on the shelf.",
)
@limiter.limit(settings.rate_limit_write)
def delete_borrower(request: Request, borrower_id: BorrowerId, db: DbSession) -> None:
    """Delete a borrower."""
    registration.delete_borrower(db, borrower_id)
