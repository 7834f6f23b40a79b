"""Relay-style cursor pagination over in-memory sequences."""

from relay_connection.core.exceptions import (
    AppException,
    ConnectionDefinitionError,
    CrossedCursorsError,
    InvalidConnectionArgumentsError,
)
from relay_connection.core.pagination import (
    Connection,
    ConnectionArguments,
    ConnectionDefinition,
    ConnectionOptions,
    CursorPage,
    Edge,
    PageInfo,
    define_connection,
)

__version__ = "0.1.0"

__all__ = [
    "AppException",
    "Connection",
    "ConnectionArguments",
    "ConnectionDefinition",
    "ConnectionDefinitionError",
    "ConnectionOptions",
    "CrossedCursorsError",
    "CursorPage",
    "Edge",
    "InvalidConnectionArgumentsError",
    "PageInfo",
    "__version__",
    "define_connection",
]
