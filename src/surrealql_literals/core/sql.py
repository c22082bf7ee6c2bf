"""Helper utilities for constructing SurrealQL fragments.

String escaping and literal formatting live in one place so callers building
query text never repeat the quote handling themselves.  Output is
deterministic, which keeps the literal tests simple to state.

Only the single quote is escaped.  Backslashes already present in the input
are passed through untouched, so a value ending in ``\\`` can still swallow
the escape that follows it.  Callers embedding untrusted text must account
for that.
"""

from __future__ import annotations

import logging

from .query_helpers import normalize_ids
from .types import CategoryIds, TextInput

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _to_valid_utf8(text: object) -> str:
    """Return ``text`` as a ``str`` with every invalid UTF-8 sequence removed."""

    if isinstance(text, _BYTES_TYPES):
        raw = bytes(text)
    else:
        text = text if isinstance(text, str) else str(text)
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates encode to bytes the decoder rejects below.
            raw = text.encode("utf-8", errors="surrogatepass")
        else:
            return text

    repaired = raw.decode("utf-8", errors="ignore")
    dropped = len(raw) - len(repaired.encode("utf-8"))
    if dropped:
        logger.debug("Dropped %d invalid UTF-8 byte(s) from query input", dropped)
    return repaired


def sanitize(text: TextInput) -> str:
    """Return ``text`` as valid UTF-8 with every ``'`` escaped as ``\\'``."""

    return _to_valid_utf8(text).replace("'", "\\'")


def format_literal(value: object) -> str:
    """Return ``value`` formatted as a quoted SurrealQL string literal."""

    return "'{}'".format(sanitize(value))


def format_id_array(ids: CategoryIds) -> str:
    """Return ``ids`` rendered as a SurrealQL array literal.

    Elements are sanitized but not quoted, since category IDs are record IDs
    such as ``category:books``.  Order is kept and duplicates are not removed.
    An empty or absent list renders as ``[]``.
    """

    normalized = normalize_ids(ids)
    if not normalized:
        return "[]"
    return "[{}]".format(", ".join(sanitize(id_) for id_ in normalized))
