"""Unit tests for cursor codecs, strategies and connection schemas."""
from __future__ import annotations

import base64 as std_base64
from dataclasses import dataclass
from uuid import UUID

import pytest

from relay_connection.core.pagination.cursor import PrefixedCursorCodec, base64, unbase64
from relay_connection.core.pagination.schemas import (
    Connection,
    CursorPage,
    Edge,
    PageInfo,
)
from relay_connection.core.pagination.strategies import (
    DocumentKey,
    compare_documents,
    compare_numbers,
    cursor_to_document,
    cursor_to_number,
    document_connection,
    document_to_cursor,
    number_to_cursor,
)


# ──────────────────────────────────────────────────────────────
# Test cursor helpers
# ──────────────────────────────────────────────────────────────


class TestBase64:
    """Tests for base64/unbase64 helpers."""

    def test_base64_matches_standard_alphabet(self):
        assert base64("number:42") == std_base64.b64encode(b"number:42").decode()

    def test_unbase64_reverses_base64(self):
        assert unbase64(base64("mongo:abc")) == "mongo:abc"

    @pytest.mark.parametrize("token", ["not-valid-base64!!!", "abc", "é"])
    def test_unbase64_garbage_is_empty(self, token):
        """Malformed tokens decode to an empty string instead of raising."""
        assert unbase64(token) == ""


class TestPrefixedCursorCodec:
    """Tests for PrefixedCursorCodec encode/decode."""

    @pytest.fixture
    def codec(self):
        return PrefixedCursorCodec(prefix="rank:", dump=str, load=int)

    def test_encode_cursor(self, codec):
        """Cursors are the base64 of prefix and payload."""
        encoded = codec.encode(7)

        assert std_base64.b64decode(encoded).decode() == "rank:7"

    def test_decode_cursor(self, codec):
        assert codec.decode(codec.encode(-12)) == -12

    def test_decode_foreign_prefix_is_none(self, codec):
        assert codec.decode(base64("other:7")) is None

    def test_decode_empty_payload_is_none(self, codec):
        assert codec.decode(base64("rank:")) is None

    def test_decode_malformed_payload_is_none(self, codec):
        """A load failure means the cursor is unusable."""
        assert codec.decode(base64("rank:seven")) is None


# ──────────────────────────────────────────────────────────────
# Test strategies
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Doc:
    id: UUID
    title: str = ""


class TestNumberStrategy:
    """Tests for the number cursor strategy."""

    def test_round_trip(self):
        """Decoded cursors compare equal to the encoded number."""
        for num in range(-50, 51):
            assert compare_numbers(cursor_to_number(number_to_cursor(num)), num) == 0

    def test_cursor_format(self):
        assert unbase64(number_to_cursor(3)) == "number:3"

    @pytest.mark.parametrize(("a", "b", "sign"), [(1, 2, -1), (2, 1, 1), (5, 5, 0)])
    def test_compare_numbers(self, a, b, sign):
        assert compare_numbers(a, b) == sign


class TestDocumentStrategy:
    """Tests for the document (UUID id) cursor strategy."""

    @pytest.fixture
    def docs(self):
        return [Doc(id=UUID(int=i), title=f"doc-{i}") for i in range(1, 6)]

    def test_round_trip(self, docs):
        for doc in docs:
            key = cursor_to_document(document_to_cursor(doc))

            assert key == DocumentKey(id=doc.id)
            assert compare_documents(key, doc) == 0

    def test_cursor_format(self, docs):
        assert unbase64(document_to_cursor(docs[0])) == f"document:{docs[0].id}"

    def test_string_ids_are_accepted(self, docs):
        """Documents may carry their id as a string."""

        @dataclass
        class Row:
            id: str

        row = Row(id=str(docs[2].id))

        assert document_to_cursor(row) == document_to_cursor(docs[2])

    @pytest.mark.parametrize(
        "cursor",
        [base64("document:not-a-uuid"), base64("number:1"), "garbage"],
    )
    def test_invalid_cursor_is_none(self, cursor):
        assert cursor_to_document(cursor) is None

    def test_document_connection_window(self, docs):
        """Documents paginate by id, whatever order they arrive in."""
        shuffled = [docs[3], docs[0], docs[4], docs[2], docs[1]]

        c = document_connection.connection_from_array(
            shuffled,
            {"first": 2, "after": document_to_cursor(docs[1])},
            {"sorted": False},
        )

        assert c.nodes == [docs[2], docs[3]]
        assert c.page_info.has_previous_page is True
        assert c.page_info.has_next_page is True
        assert c.page_info.start_cursor == document_to_cursor(docs[2])


# ──────────────────────────────────────────────────────────────
# Test Pagination Schemas
# ──────────────────────────────────────────────────────────────


class TestPageInfo:
    """Tests for PageInfo schema."""

    def test_page_info_creation(self):
        """PageInfo should store pagination metadata."""
        page_info = PageInfo(
            has_previous_page=False,
            has_next_page=True,
            start_cursor="cursor-start",
            end_cursor="cursor-end",
        )

        assert page_info.has_previous_page is False
        assert page_info.has_next_page is True
        assert page_info.start_cursor == "cursor-start"
        assert page_info.end_cursor == "cursor-end"

    def test_page_info_optional_cursors(self):
        page_info = PageInfo(has_previous_page=False, has_next_page=False)

        assert page_info.start_cursor is None
        assert page_info.end_cursor is None

    def test_page_info_dumps_relay_names(self):
        page_info = PageInfo(has_previous_page=True, has_next_page=False, start_cursor="a")

        assert page_info.model_dump(by_alias=True) == {
            "hasPreviousPage": True,
            "hasNextPage": False,
            "startCursor": "a",
            "endCursor": None,
        }

    def test_page_info_is_frozen(self):
        page_info = PageInfo(has_previous_page=False, has_next_page=False)

        with pytest.raises(ValueError):
            page_info.has_next_page = True


class TestConnection:
    """Tests for Connection schema."""

    @pytest.fixture
    def connection(self):
        return Connection[str](
            edges=[
                Edge[str](node="item1", cursor="cursor1"),
                Edge[str](node="item2", cursor="cursor2"),
            ],
            page_info=PageInfo(
                has_previous_page=True,
                has_next_page=True,
                start_cursor="cursor1",
                end_cursor="cursor2",
            ),
        )

    def test_connection_nodes_property(self, connection):
        """nodes strips the edge wrappers."""
        assert connection.nodes == ["item1", "item2"]
        assert connection.cursors == ["cursor1", "cursor2"]

    def test_connection_dumps_relay_shape(self, connection):
        dumped = connection.model_dump(by_alias=True)

        assert dumped["edges"][0] == {"node": "item1", "cursor": "cursor1"}
        assert dumped["pageInfo"]["hasNextPage"] is True
        assert dumped["pageInfo"]["endCursor"] == "cursor2"

    def test_to_cursor_page(self, connection):
        page = connection.to_cursor_page()

        assert isinstance(page, CursorPage)
        assert page.items == ["item1", "item2"]
        assert page.next_cursor == "cursor2"
        assert page.prev_cursor == "cursor1"
        assert page.has_more is True

    def test_to_cursor_page_last_page(self):
        connection = Connection[int](
            edges=[Edge[int](node=1, cursor="c1")],
            page_info=PageInfo(
                has_previous_page=False,
                has_next_page=False,
                start_cursor="c1",
                end_cursor="c1",
            ),
        )

        page = connection.to_cursor_page()

        assert page.next_cursor is None
        assert page.prev_cursor is None
        assert page.has_more is False

    def test_engine_output_is_json_compatible(self):
        """Windowed connections serialize straight into a relay response."""
        from relay_connection.core.pagination.strategies import number_connection

        c = number_connection.connection_from_array([1, 2, 3], {"first": 1}, {"sorted": True})

        assert c.model_dump_json(by_alias=True) == (
            '{"edges":[{"node":1,"cursor":"' + number_to_cursor(1) + '"}],'
            '"pageInfo":{"hasPreviousPage":false,"hasNextPage":true,'
            '"startCursor":"' + number_to_cursor(1) + '","endCursor":"' + number_to_cursor(1) + '"}}'
        )
