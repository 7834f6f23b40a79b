"""Ready-made connection definitions.

Two strategy sets cover the common cases:

- numbers: nodes are ints, cursors are ``base64("number:<n>")``
- documents: nodes carry an ``id`` (UUID), cursors are
  ``base64("document:<uuid>")``

Each module-level ``*_connection`` is a ``ConnectionDefinition`` and unpacks
into ``(connection_from_array, connection_from_promised_array)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from relay_connection.core.pagination.connection import define_connection
from relay_connection.core.pagination.cursor import PrefixedCursorCodec

NUMBER_PREFIX = "number:"
DOCUMENT_PREFIX = "document:"


# ──────────────────────────────────────────────────────────────
# Numbers
# ──────────────────────────────────────────────────────────────

_number_codec: PrefixedCursorCodec[int] = PrefixedCursorCodec(
    prefix=NUMBER_PREFIX,
    dump=str,
    load=int,
)


def number_to_cursor(num: int) -> str:
    return _number_codec.encode(num)


def cursor_to_number(cursor: str) -> int | None:
    return _number_codec.decode(cursor)


def compare_numbers(num1: int, num2: int) -> int:
    return (num1 > num2) - (num1 < num2)


number_connection = define_connection(
    comparable_to_cursor=number_to_cursor,
    cursor_to_comparable=cursor_to_number,
    comparator=compare_numbers,
)


# ──────────────────────────────────────────────────────────────
# Documents
# ──────────────────────────────────────────────────────────────


class ComparableDocument(Protocol):
    """Anything with an ``id`` attribute, e.g. an ORM row or a Pydantic model."""

    @property
    def id(self) -> UUID | str: ...


@dataclass(frozen=True)
class DocumentKey:
    """The ordering-relevant projection of a document, decoded from a cursor."""

    id: UUID


def _document_id(doc: ComparableDocument) -> str:
    return str(UUID(str(doc.id)))


_document_codec: PrefixedCursorCodec[DocumentKey] = PrefixedCursorCodec(
    prefix=DOCUMENT_PREFIX,
    dump=_document_id,
    load=lambda payload: DocumentKey(id=UUID(payload)),
)


def document_to_cursor(doc: ComparableDocument) -> str:
    """Encode a document's id into a cursor.

    Raises:
        ValueError: The document id is not a valid UUID.
    """
    return _document_codec.encode(doc)


def cursor_to_document(cursor: str) -> DocumentKey | None:
    """Decode a cursor into a document key, None for foreign or malformed cursors."""
    return _document_codec.decode(cursor)


def compare_documents(doc1: ComparableDocument, doc2: ComparableDocument) -> int:
    """Order documents by the canonical string form of their ids."""
    id1 = _document_id(doc1)
    id2 = _document_id(doc2)
    if id1 < id2:
        return -1
    if id1 > id2:
        return 1
    return 0


document_connection = define_connection(
    comparable_to_cursor=document_to_cursor,
    cursor_to_comparable=cursor_to_document,
    comparator=compare_documents,
)


__all__ = [
    "DOCUMENT_PREFIX",
    "NUMBER_PREFIX",
    "ComparableDocument",
    "DocumentKey",
    "compare_documents",
    "compare_numbers",
    "cursor_to_document",
    "cursor_to_number",
    "document_connection",
    "document_to_cursor",
    "number_connection",
    "number_to_cursor",
]
