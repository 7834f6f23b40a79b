"""Relay connection types for Strawberry GraphQL.

Builds Relay-compliant Edge/Connection types around any Strawberry node type
and converts a windowed ``Connection`` into them.

Example:
    NumberConnection = create_connection_type(int, "Number")

    @strawberry.type
    class Query:
        @strawberry.field
        def numbers(self, args: ConnectionArgumentsInput | None = None) -> NumberConnection:
            connection = number_connection.connection_from_array(
                NUMBERS, args.to_arguments() if args else None
            )
            return NumberConnection.from_connection(connection)
"""

# Annotations are evaluated eagerly so the factory can close over node types.

from collections.abc import Callable
from typing import Any

import strawberry

from relay_connection.core.pagination.schemas import Connection, PageInfo
from relay_connection.core.pagination.types import ConnectionArguments

__all__ = [
    "ConnectionArgumentsInput",
    "PageInfoType",
    "create_connection_type",
]


@strawberry.type(description="Relay PageInfo for cursor-based pagination")
class PageInfoType:
    """GraphQL mirror of ``relay_connection.core.pagination.schemas.PageInfo``."""

    has_previous_page: bool = strawberry.field(description="Whether previous items exist")
    has_next_page: bool = strawberry.field(description="Whether more items exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item",
    )

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> "PageInfoType":
        return cls(
            has_previous_page=page_info.has_previous_page,
            has_next_page=page_info.has_next_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        )


@strawberry.input(description="Input for cursor-based pagination")
class ConnectionArgumentsInput:
    """Relay pagination arguments as a GraphQL input object."""

    first: int | None = strawberry.field(
        default=None,
        description="Number of items to return from the start",
    )
    after: str | None = strawberry.field(
        default=None,
        description="Cursor to start pagination from (exclusive)",
    )
    last: int | None = strawberry.field(
        default=None,
        description="Number of items to return from the end",
    )
    before: str | None = strawberry.field(
        default=None,
        description="Cursor to end pagination at (exclusive)",
    )

    def to_arguments(self) -> ConnectionArguments:
        return ConnectionArguments(
            first=self.first,
            after=self.after,
            last=self.last,
            before=self.before,
        )


def create_connection_type(
    node_type: Any,
    type_name_prefix: str,
) -> type:
    """Create Relay-compliant Edge and Connection types for a node type.

    Args:
        node_type: Strawberry type (or scalar) used for ``node``
        type_name_prefix: Prefix for the type names (e.g., "Task" -> "TaskEdge",
            "TaskConnection")

    Returns:
        A Strawberry Connection type class with a ``from_connection`` classmethod.
        The Edge type is available as ``<Connection>.edge_type``.
    """

    @strawberry.type(
        name=f"{type_name_prefix}Edge",
        description=f"Edge containing a {type_name_prefix} node and cursor",
    )
    class EdgeType:
        node: node_type = strawberry.field(  # type: ignore[valid-type]
            description="The node containing the actual data"
        )
        cursor: str = strawberry.field(
            description="Opaque cursor for this edge used in pagination"
        )

    @strawberry.type(
        name=f"{type_name_prefix}Connection",
        description=f"Relay connection for {type_name_prefix} with cursor-based pagination",
    )
    class ConnectionType:
        edges: list[EdgeType] = strawberry.field(
            description="List of edges containing nodes and their cursors"
        )
        page_info: PageInfoType = strawberry.field(
            description="Pagination information including hasNextPage, hasPreviousPage, etc."
        )

        @classmethod
        def from_connection(
            cls,
            connection: Connection[Any],
            node_converter: Callable[[Any], Any] | None = None,
        ) -> "ConnectionType":
            convert = node_converter or (lambda node: node)
            return cls(
                edges=[
                    EdgeType(node=convert(edge.node), cursor=edge.cursor)
                    for edge in connection.edges
                ],
                page_info=PageInfoType.from_page_info(connection.page_info),
            )

    ConnectionType.edge_type = EdgeType  # type: ignore[attr-defined]
    return ConnectionType
