"""Strawberry GraphQL types for relay connections."""

from relay_connection.graphql.types import (
    ConnectionArgumentsInput,
    PageInfoType,
    create_connection_type,
)

__all__ = [
    "ConnectionArgumentsInput",
    "PageInfoType",
    "create_connection_type",
]
