"""CLI utilities for running async operations and formatting output."""

from relay_connection.cli.utils.async_runner import coro
from relay_connection.cli.utils.formatters import error

__all__ = [
    "coro",
    "error",
]
