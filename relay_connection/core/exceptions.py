"""Custom exception classes for connection pagination."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base relay-connection exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details so a GraphQL or HTTP layer can surface
    the error without translating it.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        extra: Additional context-specific information about the error.

    Example:
        raise AppException(
            status_code=400,
            detail="Cursor window is empty",
            type="empty-window",
            extra={"first": 10},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code."""
        titles = {
            400: "Bad Request",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
        }
        return titles.get(status_code, "Error")

    def to_problem(self) -> dict[str, Any]:
        """Render the exception as an RFC 7807 problem details mapping."""
        problem: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "status": self.status_code,
            "detail": self.detail,
        }
        problem.update(self.extra)
        return problem


class ConnectionDefinitionError(AppException, TypeError):
    """Raised when a connection is defined without a required strategy.

    Example:
        raise ConnectionDefinitionError(
            detail="Must provide 'comparator'",
            extra={"parameter": "comparator"},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "connection-definition-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=500,
            detail=detail,
            type=type,
            title="Connection Definition Error",
            extra=extra,
        )


class InvalidConnectionArgumentsError(AppException, ValueError):
    """Raised when pagination arguments cannot describe a window.

    Example:
        raise InvalidConnectionArgumentsError(
            detail="Must not provide both 'first' and 'last'",
            extra={"first": 2, "last": 3},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "invalid-connection-arguments",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title="Invalid Connection Arguments",
            extra=extra,
        )


class CrossedCursorsError(InvalidConnectionArgumentsError):
    """Raised when the 'before' cursor sorts ahead of the 'after' cursor."""

    def __init__(
        self,
        detail: str = "'before' must be after 'after'",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type="crossed-cursors", extra=extra)


__all__ = [
    "AppException",
    "ConnectionDefinitionError",
    "CrossedCursorsError",
    "InvalidConnectionArgumentsError",
]
