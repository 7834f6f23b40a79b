"""Connection definition and the windowing engine.

``define_connection`` binds the three cursor strategies once and returns a
``ConnectionDefinition`` whose ``connection_from_array`` slices an ordered
(or orderable) sequence into a relay connection:

    numbers = define_connection(
        comparable_to_cursor=number_to_cursor,
        cursor_to_comparable=cursor_to_number,
        comparator=compare_numbers,
    )
    page = numbers.connection_from_array([1, 2, 3, 4, 5], {"first": 2})
    page.nodes                   # [1, 2]
    page.page_info.has_next_page  # True

Windowing never mutates the input and keeps no state between calls, so one
definition can serve concurrent requests.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from relay_connection.core.exceptions import (
    ConnectionDefinitionError,
    CrossedCursorsError,
    InvalidConnectionArgumentsError,
)
from relay_connection.core.pagination.schemas import Connection
from relay_connection.core.pagination.types import (
    ConnectionArguments,
    ConnectionOptions,
)

if TYPE_CHECKING:
    from relay_connection.core.pagination.types import (
        ComparableToCursor,
        Comparator,
        ConnectionCursor,
        CursorToComparable,
    )

logger = logging.getLogger(__name__)

# Sentinel index for "no node lies inside this boundary".
NOT_FOUND = -1


def _edges_to_connection(
    edges: list[dict[str, Any]],
    *,
    has_previous_page: bool,
    has_next_page: bool,
) -> Connection[Any]:
    return Connection(
        edges=edges,
        page_info={
            "start_cursor": edges[0]["cursor"] if edges else None,
            "end_cursor": edges[-1]["cursor"] if edges else None,
            "has_previous_page": has_previous_page,
            "has_next_page": has_next_page,
        },
    )


def _resolve_flag(override: bool | None, derived: bool) -> bool:
    return derived if override is None else override


def _validate_arguments(args: ConnectionArguments) -> None:
    if args.first is not None and args.last is not None:
        raise InvalidConnectionArgumentsError(
            detail="Must not provide both 'first' and 'last'",
            extra={"first": args.first, "last": args.last},
        )
    if (args.first is not None and args.first <= 0) or (
        args.last is not None and args.last <= 0
    ):
        raise InvalidConnectionArgumentsError(
            detail="'first' and 'last' must be 1 or greater",
            extra={"first": args.first, "last": args.last},
        )


@dataclass(frozen=True)
class ConnectionDefinition[C]:
    """Cursor strategies bound into a connection builder.

    Attributes:
        comparable_to_cursor: Encodes a node into its opaque cursor.
        cursor_to_comparable: Decodes a cursor, ``None`` when unusable.
        comparator: Total order over comparables.
        default_options: Options used when a call passes none.
    """

    comparable_to_cursor: ComparableToCursor[C]
    cursor_to_comparable: CursorToComparable[C]
    comparator: Comparator[C]
    default_options: ConnectionOptions | None = None

    def __post_init__(self) -> None:
        for name in ("comparable_to_cursor", "cursor_to_comparable", "comparator"):
            if not callable(getattr(self, name)):
                raise ConnectionDefinitionError(
                    detail=f"Must provide '{name}'",
                    extra={"parameter": name},
                )

    def __iter__(self) -> Iterator[Any]:
        """Unpack into ``(connection_from_array, connection_from_promised_array)``."""
        yield self.connection_from_array
        yield self.connection_from_promised_array

    def _active_comparator(self, desc: bool) -> Comparator[C]:
        if not desc:
            return self.comparator
        comparator = self.comparator
        return lambda a, b: -comparator(a, b)

    def _decode(self, cursor: ConnectionCursor | None, side: str) -> C | None:
        if not cursor:
            return None
        comparable = self.cursor_to_comparable(cursor)
        if comparable is None:
            logger.debug(
                "Undecodable cursor treated as unbounded",
                extra={"cursor_side": side},
            )
        return comparable

    @staticmethod
    def _find_start_index(
        nodes: Sequence[C], after: C | None, comparator: Comparator[C]
    ) -> int:
        """First index whose node sorts strictly after ``after``."""
        if after is None:
            return 0
        for index, node in enumerate(nodes):
            diff = comparator(after, node)
            if diff == 0:
                return index + 1
            if diff < 0:
                return index
        return NOT_FOUND

    @staticmethod
    def _find_end_index(
        nodes: Sequence[C], before: C | None, comparator: Comparator[C]
    ) -> int:
        """Last index whose node sorts strictly before ``before``."""
        if before is None:
            return len(nodes) - 1
        for index in range(len(nodes) - 1, -1, -1):
            diff = comparator(before, nodes[index])
            if diff == 0:
                return index - 1
            if diff > 0:
                return index
        return NOT_FOUND

    def _to_edge(self, node: C) -> dict[str, Any]:
        return {"node": node, "cursor": self.comparable_to_cursor(node)}

    def connection_from_array(
        self,
        data: Sequence[C],
        args: ConnectionArguments | Mapping[str, Any] | None = None,
        options: ConnectionOptions | Mapping[str, Any] | None = None,
    ) -> Connection[C]:
        """Window ``data`` into a connection.

        Args:
            data: Nodes to paginate. Never mutated.
            args: ``first``/``after``/``last``/``before`` pagination arguments.
            options: Sort hints and page flag overrides. Defaults come from
                ``default_options``, then from ``PaginationSettings``.

        Returns:
            Connection with the windowed edges and page info.

        Raises:
            InvalidConnectionArgumentsError: ``first`` and ``last`` are both
                set, or either is below 1.
            CrossedCursorsError: ``before`` sorts ahead of ``after``.
        """
        args = ConnectionArguments.coerce(args)
        opts = ConnectionOptions.coerce(options, self._resolve_default_options())
        _validate_arguments(args)

        if not data:
            return _edges_to_connection(
                [],
                has_previous_page=_resolve_flag(opts.has_previous_page, False),
                has_next_page=_resolve_flag(opts.has_next_page, False),
            )

        comparator = self._active_comparator(opts.desc)

        after_node = self._decode(args.after, "after")
        before_node = self._decode(args.before, "before")
        if (
            after_node is not None
            and before_node is not None
            and comparator(after_node, before_node) > 0
        ):
            raise CrossedCursorsError(
                extra={"after": args.after, "before": args.before}
            )

        nodes = list(data)
        if not opts.sorted:
            nodes.sort(key=functools.cmp_to_key(comparator))

        start_index = self._find_start_index(nodes, after_node, comparator)
        if start_index == NOT_FOUND:
            logger.debug("No nodes after cursor", extra={"node_count": len(nodes)})
            return _edges_to_connection(
                [],
                has_previous_page=_resolve_flag(opts.has_previous_page, True),
                has_next_page=_resolve_flag(opts.has_next_page, False),
            )

        end_index = self._find_end_index(nodes, before_node, comparator)
        if end_index == NOT_FOUND:
            logger.debug("No nodes before cursor", extra={"node_count": len(nodes)})
            return _edges_to_connection(
                [],
                has_previous_page=_resolve_flag(opts.has_previous_page, False),
                has_next_page=_resolve_flag(opts.has_next_page, True),
            )

        if start_index > end_index:
            raise CrossedCursorsError(
                extra={"after": args.after, "before": args.before}
            )

        edges = [self._to_edge(node) for node in nodes[start_index : end_index + 1]]

        # Effective indices after truncation are relative to the window.
        if args.first is not None and args.first < len(edges):
            end_index = args.first - 1
            edges = edges[: args.first]
        elif args.last is not None and args.last < len(edges):
            start_index = len(edges) - args.last
            edges = edges[-args.last :]

        return _edges_to_connection(
            edges,
            has_previous_page=_resolve_flag(opts.has_previous_page, start_index > 0),
            has_next_page=_resolve_flag(
                opts.has_next_page, end_index < len(nodes) - 1
            ),
        )

    async def connection_from_promised_array(
        self,
        data: Awaitable[Sequence[C]],
        args: ConnectionArguments | Mapping[str, Any] | None = None,
        options: ConnectionOptions | Mapping[str, Any] | None = None,
    ) -> Connection[C]:
        """Await ``data`` and window the result.

        Errors raised by the awaitable propagate unchanged.
        """
        return self.connection_from_array(await data, args, options)

    def _resolve_default_options(self) -> ConnectionOptions:
        if self.default_options is not None:
            return self.default_options
        from relay_connection.core.settings import get_pagination_settings

        settings = get_pagination_settings()
        return ConnectionOptions(
            sorted=settings.default_sorted,
            desc=settings.default_desc,
        )


def define_connection[C](
    *,
    comparable_to_cursor: ComparableToCursor[C] | None = None,
    cursor_to_comparable: CursorToComparable[C] | None = None,
    comparator: Comparator[C] | None = None,
    default_options: ConnectionOptions | Mapping[str, Any] | None = None,
) -> ConnectionDefinition[C]:
    """Define a connection from its cursor strategies.

    Args:
        comparable_to_cursor: Encodes a node into an opaque cursor.
        cursor_to_comparable: Decodes a cursor back into a comparable or None.
        comparator: Total order over comparables (negative/zero/positive).
        default_options: Options applied when a call passes none.

    Returns:
        ConnectionDefinition exposing ``connection_from_array`` and
        ``connection_from_promised_array``.

    Raises:
        ConnectionDefinitionError: A strategy is missing or not callable.

    Example:
        connection_from_array, connection_from_promised_array = define_connection(
            comparable_to_cursor=document_to_cursor,
            cursor_to_comparable=cursor_to_document,
            comparator=compare_documents,
        )
    """
    return ConnectionDefinition(
        comparable_to_cursor=comparable_to_cursor,  # type: ignore[arg-type]
        cursor_to_comparable=cursor_to_comparable,  # type: ignore[arg-type]
        comparator=comparator,  # type: ignore[arg-type]
        default_options=(
            ConnectionOptions.coerce(default_options) if default_options is not None else None
        ),
    )


__all__ = ["NOT_FOUND", "ConnectionDefinition", "define_connection"]
