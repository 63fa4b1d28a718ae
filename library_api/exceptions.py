"""
Domain Exceptions

Errors raised by the services. They carry no HTTP knowledge; main.py
translates each kind into a status code and a JSON body.

- ValidationFailedError: caller input is blank or malformed (400)
- NotFoundError: a referenced book or borrower id does not exist (404)
- ConflictError: a business rule rejected the request (409)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single (field, message) pair of a validation failure."""

    field: str
    message: str


class LibraryError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailedError(LibraryError):
    """One or more input fields are blank or malformed."""

    def __init__(self, errors: list[FieldError], message: str = "Validation Failed") -> None:
        super().__init__(message)
        self.errors = errors


class NotFoundError(LibraryError):
    """The referenced book or borrower does not exist."""


class ConflictError(LibraryError):
    """
    A business rule was violated.

    Duplicate ISBN with different metadata, double borrow, returning a
    book that is not held, or a duplicate borrower name/email.
    """
