"""Shared helper utilities for preparing query inputs."""

from __future__ import annotations

import pandas as pd

from .types import CategoryIds


def _is_missing(ids: object) -> bool:
    """Return ``True`` for ``None`` and pandas missing-value scalars."""

    if ids is None:
        return True
    return bool(pd.api.types.is_scalar(ids) and pd.isna(ids))


def normalize_ids(ids: CategoryIds) -> list[str]:
    """Return ``ids`` as a list, substituting an empty list when absent.

    Missing cells read from a DataFrame column arrive as ``NaN`` or ``pd.NA``
    and are treated the same as ``None``.  A list is returned unchanged; any
    other iterable (``pd.Series``, ``pd.Index``, tuples, generators) is
    materialized in iteration order.
    """

    if _is_missing(ids):
        return []
    if isinstance(ids, (str, bytes)):
        return [ids]
    if isinstance(ids, list):
        return ids
    return list(ids)


__all__ = ["normalize_ids"]
