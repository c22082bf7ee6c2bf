"""Public package API."""

from importlib import metadata

from .core import (
    CategoryIds,
    TextInput,
    format_id_array,
    format_literal,
    normalize_ids,
    sanitize,
)

__all__ = [
    "sanitize",
    "format_id_array",
    "format_literal",
    "normalize_ids",
    "CategoryIds",
    "TextInput",
]

try:
    __version__ = metadata.version("surrealql-literals")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
