"""Connection response schemas for cursor-based pagination.

This module provides two pagination styles:

1. GraphQL Connection Pattern (Relay specification):
   - Edges pairing each node with its cursor
   - PageInfo with navigation metadata
   - Serializes to the relay wire shape with ``model_dump(by_alias=True)``

2. Simple REST Style:
   - Just items, cursors, and has_more flag
   - Derived from a Connection with ``to_cursor_page()``

Both styles use the same underlying cursor mechanism.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

_RELAY_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    arbitrary_types_allowed=True,
)


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
    """

    has_previous_page: bool = Field(
        description="Whether previous items exist"
    )
    has_next_page: bool = Field(
        description="Whether more items exist"
    )
    start_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = Field(
        default=None,
        description="Cursor of the last item",
    )

    model_config = _RELAY_CONFIG


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern).

    Attributes:
        node: The actual data item
        cursor: Cursor for this specific item
    """

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")

    model_config = _RELAY_CONFIG


class Connection(BaseModel, Generic[T]):
    """GraphQL Connection pattern for cursor pagination.

    Produced by ``ConnectionDefinition.connection_from_array``. Instances are
    frozen and fully materialized.

    Client navigation:
        # First page
        connection_from_array(nodes, {"first": 10})

        # Next page (using end_cursor from previous response)
        connection_from_array(nodes, {"first": 10, "after": page_info.end_cursor})

        # Previous page (using start_cursor)
        connection_from_array(nodes, {"last": 10, "before": page_info.start_cursor})

    Attributes:
        edges: List of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(
        description="Pagination metadata",
    )

    model_config = _RELAY_CONFIG

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    @property
    def cursors(self) -> list[str]:
        return [edge.cursor for edge in self.edges]

    def to_cursor_page(self) -> CursorPage[T]:
        """Convert to simple REST-style pagination.

        Returns:
            CursorPage with items and cursors
        """
        return CursorPage(
            items=self.nodes,
            next_cursor=self.page_info.end_cursor if self.page_info.has_next_page else None,
            prev_cursor=self.page_info.start_cursor if self.page_info.has_previous_page else None,
            has_more=self.page_info.has_next_page,
        )


class CursorPage(BaseModel, Generic[T]):
    """Simple REST-style cursor pagination response.

    Attributes:
        items: List of data items
        next_cursor: Cursor for the next page (None if no more)
        prev_cursor: Cursor for the previous page (None if at start)
        has_more: Whether more items exist after this page
    """

    items: list[T] = Field(
        default_factory=list,
        description="List of items",
    )
    next_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch next page",
    )
    prev_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch previous page",
    )
    has_more: bool = Field(
        default=False,
        description="Whether more items exist",
    )

    model_config = _RELAY_CONFIG


__all__ = [
    "PageInfo",
    "Edge",
    "Connection",
    "CursorPage",
]
