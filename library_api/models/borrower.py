"""
Borrower Model

Represents a registered library member.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.book import Book


class Borrower(Base):
    """
    Borrower model representing library members.

    Table: borrowers

    Relationships:
    - books: One-to-Many, the set of books currently held

    Indexes:
    - name: Unique
    - email: Unique

    Deleting a borrower does not delete the books they hold. The ORM
    clears borrower_id on each held book before the row is removed.
    """

    __tablename__ = "borrowers"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Borrower's full name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Borrower's email address"
    )

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

    # Mapped[set[...]] makes the collection a Python set, so a book
    # can never appear twice in it.
    books: Mapped[set["Book"]] = relationship(
        "Book",
        back_populates="borrowed_by",
    )

    def __repr__(self) -> str:
        return f"Borrower(id={self.id}, name='{self.name}')"
