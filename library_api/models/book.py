"""
Book Model

A Book is a single physical copy. It is either on the shelf
(borrower_id is NULL) or held by exactly one Borrower.

The lending association is stored only on this side, as a foreign key.
Borrower.books is the ORM view of the same column, so the two sides
cannot disagree once the session is flushed.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.borrower import Borrower


class Book(Base):
    """
    Book model representing catalog entries.

    Table: books

    Fields:
    - author: Book author (required)
    - title: Book title (required)
    - isbn: International Standard Book Number (required, NOT unique)
    - borrower_id: Current holder, NULL when on the shelf

    Several rows may share an ISBN as long as author and title match;
    that rule is enforced by the catalog service, not by the database.

    Example:
        book = Book(author="George Orwell", title="1984", isbn="9780451524935")
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Book author"
    )

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    # -------------------------------------------------------------------------
    # Lending
    # -------------------------------------------------------------------------
    # SET NULL keeps the book in the catalog when its borrower is removed
    borrower_id: Mapped[int | None] = mapped_column(
        ForeignKey("borrowers.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
        comment="Borrower currently holding the book"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    borrowed_by: Mapped[Optional["Borrower"]] = relationship(
        "Borrower",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
