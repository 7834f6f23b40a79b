"""Relay-style cursor connections over in-memory sequences.

This package windows an ordered (or orderable) sequence of nodes into a
GraphQL Connection:
- Stable: boundaries are located by comparing cursor values, not offsets
- Lenient: cursors that fail to decode are treated as absent
- Stateless: inputs are copied, never mutated

Usage:
    numbers = define_connection(
        comparable_to_cursor=number_to_cursor,
        cursor_to_comparable=cursor_to_number,
        comparator=compare_numbers,
    )
    connection = numbers.connection_from_array(
        [3, 1, 2],
        {"first": 2, "after": number_to_cursor(1)},
    )
    connection.model_dump(by_alias=True)
    # {"edges": [...], "pageInfo": {"startCursor": ..., "hasNextPage": False, ...}}

The cursor strategies are supplied by the caller; ``strategies`` ships
number and document (UUID id) variants.
"""

from relay_connection.core.pagination.connection import (
    ConnectionDefinition,
    define_connection,
)
from relay_connection.core.pagination.cursor import (
    PrefixedCursorCodec,
    base64,
    unbase64,
)
from relay_connection.core.pagination.schemas import (
    Connection,
    CursorPage,
    Edge,
    PageInfo,
)
from relay_connection.core.pagination.types import (
    ComparableToCursor,
    Comparator,
    ConnectionArguments,
    ConnectionCursor,
    ConnectionOptions,
    CursorToComparable,
)

__all__ = [
    # Connection definition
    "ConnectionDefinition",
    "define_connection",
    # Strategy signatures and call inputs
    "ComparableToCursor",
    "Comparator",
    "ConnectionArguments",
    "ConnectionCursor",
    "ConnectionOptions",
    "CursorToComparable",
    # Cursor utilities
    "PrefixedCursorCodec",
    "base64",
    "unbase64",
    # Schemas
    "Connection",
    "CursorPage",
    "Edge",
    "PageInfo",
]
