"""Unit tests for the HTTP error envelope."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from blog.domain.error import (
    AlreadyModeratedError,
    AuthenticationError,
    CommentDeletedError,
    CommentNotFoundError,
    MaxNestingLevelError,
    NotAuthorizedError,
    ParentNotApprovedError,
    ParentNotFoundError,
    ThreadIntegrityError,
    ValidationError,
)
from blog.interface.error import classify_domain_error, register_error_handlers
from blog.persistence.error import DatabaseError


@pytest.fixture
def client():
    """App whose routes raise the error named in the path."""
    app = FastAPI()
    register_error_handlers(app)

    errors = {
        "database": DatabaseError("connection refused to db.internal:5432"),
        "cycle": ThreadIntegrityError("cycle at comment 42"),
        "boom": RuntimeError("secret detail"),
        "gone": CommentDeletedError("abc"),
        "missing": CommentNotFoundError("abc"),
    }

    @app.get("/raise/{name}")
    async def raise_error(name: str):
        raise errors[name]

    @app.get("/items/{item_id}")
    async def get_item(item_id: int):
        return {"id": item_id}

    return TestClient(app, raise_server_exceptions=False)


class TestClassifyDomainError:
    """Tests for classify_domain_error."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (AuthenticationError(), 401),
            (NotAuthorizedError("comment", "1", "2"), 403),
            (CommentNotFoundError("1"), 404),
            (ParentNotFoundError("1"), 404),
            (CommentDeletedError("1"), 410),
            (AlreadyModeratedError("1", "approved"), 409),
            (ValidationError("bad"), 400),
            (MaxNestingLevelError(3), 400),
            (ParentNotApprovedError("1"), 400),
            (ThreadIntegrityError("cycle"), 500),
        ],
    )
    def test_status_mapping(self, error, expected):
        assert classify_domain_error(error) == expected


class TestErrorHandlers:
    """Tests for the registered exception handlers."""

    def test_domain_error_envelope(self, client):
        response = client.get("/raise/gone")

        assert response.status_code == 410
        assert response.json() == {
            "error": {"message": "Comment abc has been deleted", "code": 410}
        }

    @pytest.mark.parametrize("name", ["database", "cycle", "boom"])
    def test_server_errors_hide_detail(self, client, name):
        """Internal failures never leak their message."""
        response = client.get(f"/raise/{name}")

        assert response.status_code == 500
        body = response.json()
        assert body["error"]["code"] == 500
        assert body["error"]["message"] == "Internal server error"

    def test_request_validation_error(self, client):
        response = client.get("/items/not-a-number")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == 400

    def test_unknown_route(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == 404

    def test_code_is_numeric_status(self, client):
        response = client.get("/raise/missing")

        assert response.status_code == 404
        assert response.json() == {
            "error": {"message": "Comment not found: abc", "code": 404}
        }
