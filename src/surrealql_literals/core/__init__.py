from .query_helpers import normalize_ids
from .sql import format_id_array, format_literal, sanitize
from .types import CategoryIds, TextInput

__all__ = [
    "CategoryIds",
    "TextInput",
    "format_id_array",
    "format_literal",
    "normalize_ids",
    "sanitize",
]
