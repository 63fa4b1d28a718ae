"""
Tests for application-level endpoints and error translation.
"""

import json

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError, OperationalError

import library_api.main as main_module
from library_api.database import get_db
from library_api.exceptions import (
    ConflictError,
    FieldError,
    LibraryError,
    NotFoundError,
    ValidationFailedError,
)
from library_api.main import app, error_response, status_code_for
from library_api.schemas import ErrorDetail
from library_api.services import catalog, registration


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "v1"
        assert data["rate_limiting"]["enabled"] is False

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["docs"] == "/docs"


class TestErrorTranslation:
    def test_status_codes(self):
        assert status_code_for(ValidationFailedError([])) == status.HTTP_400_BAD_REQUEST
        assert status_code_for(NotFoundError("x")) == status.HTTP_404_NOT_FOUND
        assert status_code_for(ConflictError("x")) == status.HTTP_409_CONFLICT
        assert status_code_for(LibraryError("x")) == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_error_response_without_errors(self):
        response = error_response(status.HTTP_404_NOT_FOUND, "Book does not exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert json.loads(response.body) == {"message": "Book does not exist"}

    def test_error_response_with_errors(self):
        response = error_response(
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            [ErrorDetail(field="isbn", message="ISBN is a required field")],
        )

        assert json.loads(response.body) == {
            "message": "Validation Failed",
            "errors": [{"field": "isbn", "message": "ISBN is a required field"}],
        }

    def test_field_error_is_value_object(self):
        assert FieldError("name", "m") == FieldError(field="name", message="m")

    def test_malformed_json_body(self, client):
        """An unparseable body is a 400, not a 422."""
        response = client.post(
            "/api/v1/books/",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Validation Failed"


# =============================================================================
# Database and unexpected errors
# =============================================================================


@pytest.fixture
def lenient_client(db_session):
    """Test client that hands back 500 responses instead of re-raising."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _raise(exc):
    def _fail(*args, **kwargs):
        raise exc

    return _fail


class TestDatabaseErrors:
    def test_integrity_error_is_conflict(self, client, monkeypatch):
        """A constraint that slips past the service checks is a 409."""
        monkeypatch.setattr(
            registration,
            "create_borrower",
            _raise(IntegrityError("INSERT INTO borrowers", {}, Exception("UNIQUE constraint failed"))),
        )

        response = client.post(
            "/api/v1/borrowers/",
            json={"name": "Ada", "email": "ada@example.com"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"message": "The request conflicts with existing data."}

    def test_other_database_error_is_500(self, client, monkeypatch):
        monkeypatch.setattr(
            catalog,
            "get_all_books",
            _raise(OperationalError("SELECT", {}, Exception("database is locked"))),
        )

        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        body = response.json()
        assert body == {"message": "A database error occurred. Please try again later."}
        assert "locked" not in body["message"]


class TestUnhandledErrors:
    def test_unexpected_error_hides_details(self, lenient_client, monkeypatch):
        monkeypatch.setattr(catalog, "get_all_books", _raise(RuntimeError("boom")))

        response = lenient_client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"message": "An internal error occurred."}

    def test_unexpected_error_shown_in_debug(self, lenient_client, monkeypatch):
        monkeypatch.setattr(main_module.settings, "debug", True)
        monkeypatch.setattr(catalog, "get_all_books", _raise(RuntimeError("boom")))

        response = lenient_client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"message": "boom"}
