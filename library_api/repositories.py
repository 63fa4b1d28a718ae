"""
Persistence Gateway

A thin repository layer over a SQLAlchemy session. The services only
talk to storage through these five operations:

- save(entity)          -> entity with its id assigned
- find_by_id(id)        -> entity or None
- find_all()            -> every row, in id order
- delete(entity)
- find_by(field, value) -> rows whose column equals value

save() and delete() flush but never commit. The calling service
commits once, so a borrow (which writes both the book and the
borrower) lands in a single transaction.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from library_api.database import Base
from library_api.models import Book, Borrower

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Generic CRUD access for one mapped model."""

    model: type[ModelT]

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.flush()
        return entity

    def find_by_id(self, entity_id: int, *, for_update: bool = False) -> ModelT | None:
        """
        Look up a row by primary key.

        With for_update=True the row is locked until the transaction
        ends (SELECT ... FOR UPDATE). SQLite ignores the clause.
        """
        stmt = select(self.model).where(self.model.id == entity_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def find_all(self) -> list[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()

    def find_by(self, field: str, value: Any) -> list[ModelT]:
        """
        Find rows whose column `field` equals `value`.

        Raises:
            ValueError: if the model has no such column
        """
        columns = self.model.__table__.columns
        if field not in columns:
            raise ValueError(f"{self.model.__name__} has no column '{field}'")
        stmt = (
            select(self.model)
            .where(columns[field] == value)
            .order_by(self.model.id)
        )
        return list(self.db.execute(stmt).scalars().all())


class BookRepository(Repository[Book]):
    model = Book

    def find_by_isbn(self, isbn: str) -> list[Book]:
        return self.find_by("isbn", isbn)


class BorrowerRepository(Repository[Borrower]):
    model = Borrower

    def find_by_name(self, name: str) -> Borrower | None:
        matches = self.find_by("name", name)
        return matches[0] if matches else None

    def find_by_email(self, email: str) -> Borrower | None:
        matches = self.find_by("email", email)
        return matches[0] if matches else None
