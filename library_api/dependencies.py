"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

Annotated type aliases keep route signatures short:

    def list_books(db: DbSession): ...

instead of

    def list_books(db: Session = Depends(get_db)): ...
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from library_api.database import get_db

DbSession = Annotated[Session, Depends(get_db)]

# Path parameters shared by the book and borrower routers
BookId = Annotated[int, Path(description="Book identifier")]
BorrowerId = Annotated[int, Path(description="Borrower identifier")]
