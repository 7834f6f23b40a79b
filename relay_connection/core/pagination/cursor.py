"""Cursor encoding and decoding helpers.

Cursors are opaque strings that encode the position of a node in an
ordered collection. The windowing engine never looks inside them; these
helpers build the encode/decode strategy pair for the common
``base64("<prefix><payload>")`` format.

Example cursor payload:
    number:42

Encoded: bnVtYmVyOjQy
"""

from __future__ import annotations

import base64 as _b64
import binascii
import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def base64(text: str) -> str:
    """Encode text as a standard base64 string."""
    return _b64.b64encode(text.encode("utf-8")).decode("ascii")


def unbase64(token: str) -> str:
    """Decode a base64 string back to text.

    Garbage input decodes to an empty string rather than raising, so a
    tampered cursor simply fails to match any prefix.
    """
    try:
        return _b64.b64decode(token.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return ""


@dataclass(frozen=True)
class PrefixedCursorCodec[C]:
    """Build a cursor strategy pair around a namespaced payload.

    ``dump`` turns a node into its payload text and ``load`` parses the
    payload back into a comparable. ``load`` may raise ``ValueError`` or
    ``TypeError`` for malformed payloads; those decode to ``None``.

    Usage:
        codec = PrefixedCursorCodec("number:", dump=str, load=int)
        cursor = codec.encode(42)       # "bnVtYmVyOjQy"
        codec.decode(cursor)            # 42
        codec.decode("garbage")         # None
    """

    prefix: str
    dump: Callable[[C], str]
    load: Callable[[str], C]

    def encode(self, node: C) -> str:
        """Encode a node to an opaque cursor."""
        return base64(self.prefix + self.dump(node))

    def decode(self, cursor: str) -> C | None:
        """Decode a cursor, returning None when it is not one of ours."""
        unbased = unbase64(cursor)
        if not unbased.startswith(self.prefix):
            return None
        payload = unbased[len(self.prefix):]
        if not payload:
            return None
        try:
            return self.load(payload)
        except (TypeError, ValueError):
            logger.debug(
                "Discarding malformed cursor payload",
                extra={"cursor_prefix": self.prefix},
            )
            return None


__all__ = ["PrefixedCursorCodec", "base64", "unbase64"]
