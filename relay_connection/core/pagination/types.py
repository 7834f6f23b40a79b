"""Strategy signatures and per-call inputs for connection windowing.

A connection is defined by three caller-supplied strategies:

- ``comparator(a, b)``: negative, zero or positive, a total order
- ``comparable_to_cursor(node)``: opaque cursor string for a node
- ``cursor_to_comparable(cursor)``: the comparable behind a cursor, or
  ``None`` when the cursor is not usable

Round-tripping a node through its cursor must yield a value that compares
equal to the node, otherwise boundaries land in the wrong place.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

type ConnectionCursor = str
type Comparator[C] = Callable[[C, C], int]
type ComparableToCursor[C] = Callable[[C], ConnectionCursor]
type CursorToComparable[C] = Callable[[ConnectionCursor], C | None]


class ConnectionArguments(BaseModel):
    """Relay pagination arguments.

    ``first`` and ``last`` are mutually exclusive and must be 1 or greater.
    Those rules are enforced when a window is built, not here, so invalid
    arguments still parse and surface as connection errors.

    Attributes:
        before: Only return nodes that sort before this cursor.
        after: Only return nodes that sort after this cursor.
        first: Return at most this many nodes from the start of the window.
        last: Return at most this many nodes from the end of the window.
    """

    before: ConnectionCursor | None = Field(
        default=None,
        description="Cursor to end pagination at (exclusive)",
    )
    after: ConnectionCursor | None = Field(
        default=None,
        description="Cursor to start pagination from (exclusive)",
    )
    first: int | None = Field(
        default=None,
        description="Number of items to return from the start",
    )
    last: int | None = Field(
        default=None,
        description="Number of items to return from the end",
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def coerce(
        cls, value: ConnectionArguments | Mapping[str, Any] | None
    ) -> ConnectionArguments:
        """Accept an instance, a plain mapping or nothing."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)


class ConnectionOptions(BaseModel):
    """Per-call windowing options.

    Attributes:
        has_previous_page: Returned verbatim instead of the derived flag.
        has_next_page: Returned verbatim instead of the derived flag.
        sorted: Input is already ordered by the active comparator.
        desc: Reverse the comparator, so ``after`` walks towards smaller values.
    """

    has_previous_page: bool | None = Field(
        default=None,
        description="Override for the derived hasPreviousPage flag",
    )
    has_next_page: bool | None = Field(
        default=None,
        description="Override for the derived hasNextPage flag",
    )
    sorted: bool = Field(
        default=False,
        description="Whether the input is already in comparator order",
    )
    desc: bool = Field(
        default=False,
        description="Whether to window in descending order",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def coerce(
        cls,
        value: ConnectionOptions | Mapping[str, Any] | None,
        default: ConnectionOptions | None = None,
    ) -> ConnectionOptions:
        """Accept an instance, a plain mapping or nothing.

        Mapping keys missing from ``value`` fall back to ``default``.
        """
        base = default or cls()
        if value is None:
            return base
        if isinstance(value, cls):
            return value
        return base.model_copy(update=cls.model_validate(value).model_dump(exclude_unset=True))


__all__ = [
    "ComparableToCursor",
    "Comparator",
    "ConnectionArguments",
    "ConnectionCursor",
    "ConnectionOptions",
    "CursorToComparable",
]
