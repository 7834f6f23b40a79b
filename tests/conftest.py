"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolate cached settings from the environment
    - Connection Fixtures: number nodes, their cursors and expected edges
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from relay_connection.core.pagination.strategies import number_to_cursor
from relay_connection.core.settings import clear_settings_cache

# Tests never depend on a developer's environment
for _var in ("PAGINATION_DEFAULT_SORTED", "PAGINATION_DEFAULT_DESC", "LOG_LEVEL"):
    os.environ.pop(_var, None)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# ============================================================================
# Connection Fixtures
# ============================================================================


@pytest.fixture
def nodes() -> list[int]:
    """Ascending number nodes."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def cursors(nodes: list[int]) -> list[str]:
    """Cursor for each node, in node order."""
    return [number_to_cursor(node) for node in nodes]


@pytest.fixture
def edges(nodes: list[int], cursors: list[str]) -> list[dict[str, Any]]:
    """Edge dicts for each node, in node order."""
    return [{"node": node, "cursor": cursor} for node, cursor in zip(nodes, cursors, strict=True)]


@pytest.fixture
def default_options() -> dict[str, bool]:
    """Options declaring the input already sorted ascending."""
    return {"sorted": True, "desc": False}


@pytest.fixture
def expected() -> Callable[..., dict[str, Any]]:
    """Build the dumped form of a connection from its edges and flags."""

    def _build(
        edge_list: list[dict[str, Any]],
        *,
        has_previous_page: bool,
        has_next_page: bool,
    ) -> dict[str, Any]:
        return {
            "edges": edge_list,
            "page_info": {
                "start_cursor": edge_list[0]["cursor"] if edge_list else None,
                "end_cursor": edge_list[-1]["cursor"] if edge_list else None,
                "has_previous_page": has_previous_page,
                "has_next_page": has_next_page,
            },
        }

    return _build
