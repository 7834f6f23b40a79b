"""Unit tests for connection exceptions."""
from __future__ import annotations

import pytest

from relay_connection.core.exceptions import (
    AppException,
    ConnectionDefinitionError,
    CrossedCursorsError,
    InvalidConnectionArgumentsError,
)


@pytest.mark.unit
class TestAppException:
    """Tests for the base exception."""

    def test_default_title(self):
        exc = AppException(status_code=400, detail="bad")

        assert exc.title == "Bad Request"
        assert exc.type == "about:blank"
        assert str(exc) == "bad"

    def test_unknown_status_title(self):
        assert AppException(status_code=418, detail="teapot").title == "Error"

    def test_to_problem_includes_extra(self):
        exc = AppException(
            status_code=400,
            detail="bad",
            type="bad-thing",
            extra={"field": "first"},
        )

        assert exc.to_problem() == {
            "type": "bad-thing",
            "title": "Bad Request",
            "status": 400,
            "detail": "bad",
            "field": "first",
        }


@pytest.mark.unit
class TestConnectionExceptions:
    """Tests for the connection error hierarchy."""

    def test_definition_error(self):
        exc = ConnectionDefinitionError(detail="Must provide 'comparator'")

        assert isinstance(exc, AppException)
        assert isinstance(exc, TypeError)
        assert exc.status_code == 500
        assert exc.type == "connection-definition-error"

    def test_invalid_arguments_error(self):
        exc = InvalidConnectionArgumentsError(detail="nope")

        assert isinstance(exc, ValueError)
        assert exc.status_code == 400
        assert exc.title == "Invalid Connection Arguments"

    def test_crossed_cursors_error(self):
        exc = CrossedCursorsError(extra={"after": "a", "before": "b"})

        assert isinstance(exc, InvalidConnectionArgumentsError)
        assert exc.detail == "'before' must be after 'after'"
        assert exc.to_problem()["type"] == "crossed-cursors"
        assert exc.to_problem()["after"] == "a"
