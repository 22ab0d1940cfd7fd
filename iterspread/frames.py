"""Round-robin spreading for pandas Series and DataFrame rows.

Rows are assigned by position: row *p* lands in bucket *p mod size* regardless
of the index labels, so duplicate or non-integer indexes behave exactly like a
RangeIndex. Everything stays vectorized (numpy labels, positional `iloc`
slices) instead of iterating row by row. Dependencies: `pandas`, `numpy`, and
the local `utils` module.
"""
from __future__ import annotations

import logging
from typing import List

import numpy as np
import pandas as pd

from iterspread.utils import SpreadError, validate_bucket_count

logger = logging.getLogger(__name__)


def round_robin_labels(length: int, size: int) -> np.ndarray:
    """Return the bucket label of each of `length` positions as int64."""

    size = validate_bucket_count(size)
    if length < 0:
        raise SpreadError(f"Length must be non-negative, got {length}")
    return np.arange(length, dtype=np.int64) % size


def assign_buckets(frame: pd.DataFrame, size: int, column: str = "bucket") -> pd.DataFrame:
    """Return a copy of `frame` with a round-robin bucket label column."""

    if column in frame.columns:
        raise SpreadError(f"Frame already has a '{column}' column")
    labelled = frame.copy()
    labelled[column] = round_robin_labels(len(frame), size)
    return labelled


def spread_series(series: pd.Series, size: int) -> List[pd.Series]:
    """Split `series` into `size` Series, keeping index, dtype and name."""

    size = validate_bucket_count(size)
    buckets = [series.iloc[offset::size] for offset in range(size)]
    logger.debug("Spread %d series rows across %d buckets", len(series), size)
    return buckets


def spread_frame(frame: pd.DataFrame, size: int) -> List[pd.DataFrame]:
    """Split the rows of `frame` into `size` DataFrames sharing its columns.

    Complexity: O(n) overall; each bucket is a strided positional slice.
    """

    size = validate_bucket_count(size)
    buckets = [frame.iloc[offset::size] for offset in range(size)]
    logger.debug("Spread %d frame rows across %d buckets", len(frame), size)
    return buckets


__all__ = [
    "assign_buckets",
    "round_robin_labels",
    "spread_frame",
    "spread_series",
]
