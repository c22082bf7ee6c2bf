"""Public type aliases used by the SurrealQL literal helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

__all__ = ["CategoryIds", "TextInput"]

TextInput = Union[str, bytes, bytearray, memoryview]

# ``None`` (or a pandas missing value) stands for an absent list of IDs.
CategoryIds = Union[Iterable[str], str, None]
