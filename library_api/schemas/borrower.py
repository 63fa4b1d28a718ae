"""
Borrower Pydantic Schemas

Pydantic v2 Features Used:
- EmailStr: email syntax validation (backed by email-validator)
- field_validator: normalise and reject blank names
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class BorrowerBase(BaseModel):
    """Base schema with shared borrower fields."""

    name: str = Field(
        ...,
        max_length=255,
        description="Borrower's full name (unique)",
        examples=["Jane Doe"],
    )

    email: EmailStr = Field(
        ...,
        description="Borrower's email address (unique)",
        examples=["jane.doe@example.com"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        """Reject whitespace-only names and store the trimmed value."""
        if not v.strip():
            raise ValueError("Name is a required field")
        return v.strip()


class BorrowerCreate(BorrowerBase):
    """Schema for registering a borrower."""
    pass


class BorrowerUpdate(BorrowerBase):
    """
    Schema for editing a borrower.

    Both name and email are overwritten; held books are untouched.
    """
    pass


class BorrowerResponse(BorrowerBase):
    """
    Schema for borrower responses.

    books lists the ids of the books currently held, in ascending order.
    """

    id: int = Field(..., description="Unique identifier")
    books: list[int] = Field(
        default=[],
        description="Ids of the books this borrower currently holds",
    )
    created_at: datetime = Field(..., description="When the borrower registered")
    updated_at: datetime = Field(..., description="When the borrower was last updated")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 2,
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "books": [1],
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
