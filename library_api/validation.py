"""
Input Guards

The Pydantic schemas already reject bad request bodies at the HTTP
boundary. The services call these guards as well, so catalog and
registration rules hold for any caller, not only for the API.

Every failing field is collected before raising, so the caller gets
the full list in one ValidationFailedError.
"""

from email_validator import EmailNotValidError, validate_email

from library_api.exceptions import FieldError, ValidationFailedError


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _require(errors: list[FieldError], field: str, value: str | None, label: str) -> None:
    if _is_blank(value):
        errors.append(FieldError(field=field, message=f"{label} is a required field"))


def is_valid_email(value: str) -> bool:
    """Check email syntax only; no DNS lookup."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_book_fields(
    author: str | None, title: str | None, isbn: str | None
) -> tuple[str, str, str]:
    """
    Reject a book whose author, title or isbn is blank.

    Returns:
        (author, title, isbn) with surrounding whitespace removed

    Raises:
        ValidationFailedError: listing every blank field
    """
    errors: list[FieldError] = []
    _require(errors, "author", author, "Author")
    _require(errors, "title", title, "Title")
    _require(errors, "isbn", isbn, "ISBN")
    if errors:
        raise ValidationFailedError(errors)
    return author.strip(), title.strip(), isbn.strip()


def validate_borrower_fields(name: str | None, email: str | None) -> tuple[str, str]:
    """
    Reject a borrower with a blank name, or a blank or malformed email.

    Returns:
        (name, email) with surrounding whitespace removed

    Raises:
        ValidationFailedError: listing every failing field
    """
    errors: list[FieldError] = []
    _require(errors, "name", name, "Name")
    if _is_blank(email):
        errors.append(FieldError(field="email", message="Email is a required field"))
    elif not is_valid_email(email.strip()):
        errors.append(FieldError(field="email", message="Email should be valid"))
    if errors:
        raise ValidationFailedError(errors)
    return name.strip(), email.strip()
