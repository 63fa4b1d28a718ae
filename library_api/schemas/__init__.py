"""
Pydantic Schemas Package

Request/response models for the API.

Schema Naming Convention:
- XxxBase: Shared fields between create/update/response
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields accepted when editing (full overwrite)
- XxxResponse: Fields returned in API responses
"""

from library_api.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
)
from library_api.schemas.borrower import (
    BorrowerBase,
    BorrowerCreate,
    BorrowerResponse,
    BorrowerUpdate,
)
from library_api.schemas.error import ErrorDetail, ErrorResponse

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # Borrower schemas
    "BorrowerBase",
    "BorrowerCreate",
    "BorrowerUpdate",
    "BorrowerResponse",
    # Error schemas
    "ErrorDetail",
    "ErrorResponse",
]
