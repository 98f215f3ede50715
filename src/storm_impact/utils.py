"""Helpers shared by more than one pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

logger = logging.getLogger(__name__)


def cross_key_space(**levels: Sequence) -> pd.DataFrame:
    """Build the full cross product of key values as a DataFrame.

    Example:
        cross_key_space(event_type=["flood", "hail"], year=[2000, 2001])
        → 4 rows: (flood, 2000), (flood, 2001), (hail, 2000), (hail, 2001)
    """
    index = pd.MultiIndex.from_product(
        [list(values) for values in levels.values()],
        names=list(levels),
    )
    return index.to_frame(index=False)


def align_to_key_space(
    df: pd.DataFrame,
    key_space: pd.DataFrame,
    on: list[str],
    fill_value: float = 0.0,
) -> pd.DataFrame:
    """Join ``df`` onto a complete key space, default-filling missing keys.

    The result has exactly one row per row of ``key_space``, in key-space
    order, carrying any extra key-space columns (e.g. population).  Rows of
    ``df`` whose key is absent from the key space are dropped; keys with no
    row in ``df`` get ``fill_value`` in every value column.

    Args:
        df: Frame with unique ``on`` keys plus value columns.
        key_space: Frame with unique ``on`` keys (and optional attributes).
        on: Key columns shared by both frames.
        fill_value: Value for cells with no source row.

    Returns:
        The aligned frame.
    """
    value_cols = [c for c in df.columns if c not in on]
    aligned = key_space.merge(df, on=on, how="left", validate="one_to_one")

    n_filled = int(aligned[value_cols].isna().all(axis=1).sum()) if value_cols else 0
    n_dropped = len(df) - (len(aligned) - n_filled)
    aligned[value_cols] = aligned[value_cols].fillna(fill_value)

    logger.debug(
        "Aligned %s rows onto %s keys (%s filled with %s, %s outside key space)",
        f"{len(df):,}",
        f"{len(key_space):,}",
        f"{n_filled:,}",
        fill_value,
        f"{n_dropped:,}",
    )
    return aligned
