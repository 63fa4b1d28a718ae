"""
Book Pydantic Schemas

Request bodies for catalog entry and edits, and the book response.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _required_text(v: str, label: str) -> str:
    if not v.strip():
        raise ValueError(f"{label} is a required field")
    return v.strip()


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    All three fields are required and may not be blank. Values are
    stored trimmed.
    """

    author: str = Field(
        ...,
        max_length=255,
        description="Book author",
        examples=["George Orwell"],
    )

    title: str = Field(
        ...,
        max_length=500,
        description="Book title",
        examples=["1984", "Animal Farm"],
    )

    isbn: str = Field(
        ...,
        max_length=20,
        description="ISBN; several copies may share one if author and title match",
        examples=["9780451524935"],
    )

    @field_validator("author")
    @classmethod
    def author_must_not_be_blank(cls, v: str) -> str:
        return _required_text(v, "Author")

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: str) -> str:
        return _required_text(v, "Title")

    @field_validator("isbn")
    @classmethod
    def isbn_must_not_be_blank(cls, v: str) -> str:
        return _required_text(v, "ISBN")


class BookCreate(BookBase):
    """
    Schema for adding a book to the catalog.

    Example request body:
    {
        "author": "George Orwell",
        "title": "1984",
        "isbn": "9780451524935"
    }
    """
    pass


class BookUpdate(BookBase):
    """
    Schema for editing a book.

    PUT semantics: author, title and isbn are all overwritten. The
    lending state is never changed by an edit.
    """
    pass


class BookResponse(BookBase):
    """
    Schema for book responses.

    borrowed_by is the id of the borrower holding the book, or null
    when the book is on the shelf.
    """

    id: int = Field(..., description="Unique identifier")
    borrowed_by: int | None = Field(
        default=None,
        description="Id of the borrower currently holding the book",
    )
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "author": "George Orwell",
                "title": "1984",
                "isbn": "9780451524935",
                "borrowed_by": None,
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
