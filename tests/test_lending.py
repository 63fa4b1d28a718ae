"""
Tests for the Lending Endpoints

PATCH /api/v1/books/{book_id}/borrow/{borrower_id}
PATCH /api/v1/books/{book_id}/return/{borrower_id}
"""

from fastapi import status


def borrow(client, book_id, borrower_id):
    return client.patch(f"/api/v1/books/{book_id}/borrow/{borrower_id}")


def give_back(client, book_id, borrower_id):
    return client.patch(f"/api/v1/books/{book_id}/return/{borrower_id}")


class TestBorrowBook:
    """Tests for the borrow transition."""

    def test_borrow_book_success(self, client, sample_book, sample_borrower):
        """Borrowing sets both sides of the association."""
        response = borrow(client, sample_book.id, sample_borrower.id)

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.json()["borrowed_by"] == sample_borrower.id

        borrower = client.get(f"/api/v1/borrowers/{sample_borrower.id}").json()
        assert borrower["books"] == [sample_book.id]

    def test_borrow_book_twice_same_borrower(self, client, sample_book, sample_borrower):
        """A second borrow by the same borrower is a conflict."""
        borrow(client, sample_book.id, sample_borrower.id)

        response = borrow(client, sample_book.id, sample_borrower.id)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"message": "Book is already borrowed by the borrower"}

    def test_borrow_book_held_by_other_borrower(
        self, client, borrowed_book, sample_borrower, second_borrower
    ):
        """A book on loan cannot pass straight to another borrower."""
        response = borrow(client, borrowed_book.id, second_borrower.id)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"message": "Book is already borrowed by another borrower"}

        book = client.get(f"/api/v1/books/{borrowed_book.id}").json()
        assert book["borrowed_by"] == sample_borrower.id
        other = client.get(f"/api/v1/borrowers/{second_borrower.id}").json()
        assert other["books"] == []

    def test_borrow_missing_book(self, client, sample_borrower):
        """Borrowing an unknown book is 404."""
        response = borrow(client, 99999, sample_borrower.id)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Book does not exist"}

    def test_borrow_missing_borrower(self, client, sample_book):
        """Borrowing for an unknown borrower is 404."""
        response = borrow(client, sample_book.id, 99999)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Borrower does not exist"}

    def test_borrow_several_books(self, client, sample_book, sample_borrower):
        """A borrower may hold many books."""
        second = client.post(
            "/api/v1/books/",
            json={"author": "George Orwell", "title": "Animal Farm", "isbn": "9780451526342"},
        ).json()

        borrow(client, sample_book.id, sample_borrower.id)
        borrow(client, second["id"], sample_borrower.id)

        borrower = client.get(f"/api/v1/borrowers/{sample_borrower.id}").json()
        assert borrower["books"] == sorted([sample_book.id, second["id"]])


class TestReturnBook:
    """Tests for the return transition."""

    def test_return_book_success(self, client, borrowed_book, sample_borrower):
        """Returning clears both sides of the association."""
        response = give_back(client, borrowed_book.id, sample_borrower.id)

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.json()["borrowed_by"] is None

        borrower = client.get(f"/api/v1/borrowers/{sample_borrower.id}").json()
        assert borrower["books"] == []

    def test_return_book_twice(self, client, borrowed_book, sample_borrower):
        """A second return is a conflict."""
        give_back(client, borrowed_book.id, sample_borrower.id)

        response = give_back(client, borrowed_book.id, sample_borrower.id)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"message": "Book is not borrowed by the given borrower"}

    def test_return_book_never_borrowed(self, client, sample_book, sample_borrower):
        """Returning an on-shelf book is a conflict."""
        response = give_back(client, sample_book.id, sample_borrower.id)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"message": "Book is not borrowed by the given borrower"}

    def test_return_book_by_wrong_borrower(
        self, client, borrowed_book, sample_borrower, second_borrower
    ):
        """Only the holder can return a book."""
        response = give_back(client, borrowed_book.id, second_borrower.id)

        assert response.status_code == status.HTTP_409_CONFLICT

        book = client.get(f"/api/v1/books/{borrowed_book.id}").json()
        assert book["borrowed_by"] == sample_borrower.id

    def test_return_missing_book(self, client, sample_borrower):
        """Returning an unknown book is 404."""
        response = give_back(client, 99999, sample_borrower.id)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Book does not exist"}

    def test_return_missing_borrower(self, client, sample_book):
        """Returning for an unknown borrower is 404."""
        response = give_back(client, sample_book.id, 99999)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Borrower does not borrow this book"}


class TestLendingScenario:
    """End-to-end lending walk-through."""

    def test_full_cycle(self, client):
        """Create, borrow, return, then borrow again."""
        book = client.post(
            "/api/v1/books/",
            json={"author": "A", "title": "T", "isbn": "111"},
        ).json()
        borrower = client.post(
            "/api/v1/borrowers/",
            json={"name": "N", "email": "n@x.com"},
        ).json()

        lent = borrow(client, book["id"], borrower["id"])
        assert lent.json()["borrowed_by"] == borrower["id"]
        assert client.get(f"/api/v1/borrowers/{borrower['id']}").json()["books"] == [book["id"]]

        returned = give_back(client, book["id"], borrower["id"])
        assert returned.json()["borrowed_by"] is None
        assert client.get(f"/api/v1/borrowers/{borrower['id']}").json()["books"] == []

        again = borrow(client, book["id"], borrower["id"])
        assert again.status_code == status.HTTP_202_ACCEPTED
