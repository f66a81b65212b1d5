"""Unit tests for domain error to HTTP status mapping."""

import pytest

from forum.domain.error import (
    AuthorNotFoundError,
    AuthRequiredError,
    BusinessRuleViolationError,
    DuplicateVoteError,
    NotFoundError,
    ValidationError,
)
from forum.interface.api.errors import GENERIC_FAILURE, http_error


class TestHttpError:
    """Tests for http_error."""

    def test_validation_keeps_field(self):
        exc = http_error(ValidationError("title", "too long"), "Create post")

        assert exc.status_code == 422
        assert exc.detail == {"field": "title", "message": "too long"}

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (AuthRequiredError("vote"), 401),
            (NotFoundError("Post", "abc"), 404),
            (DuplicateVoteError("post", "abc", "up"), 409),
        ],
    )
    def test_client_errors(self, error, status_code):
        exc = http_error(error, "Vote")

        assert exc.status_code == status_code
        assert exc.detail == str(error)

    @pytest.mark.parametrize(
        "error",
        [AuthorNotFoundError("user_ghost"), BusinessRuleViolationError("nope")],
    )
    def test_server_errors_are_generic(self, error):
        exc = http_error(error, "Get comments")

        assert exc.status_code == 500
        assert exc.detail == GENERIC_FAILURE
        assert "user_ghost" not in exc.detail
