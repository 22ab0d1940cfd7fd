"""Shared helper utilities for the round-robin spreading package.

This module holds the bucket-count contract shared by the iterable spreader and
the pandas adapters. Keep logic small and dependency-free so both entry points
reject bad input identically, before any source data is consumed.
"""
from __future__ import annotations

from numbers import Integral


class SpreadError(ValueError):
    """Raised when a spread is requested with an invalid bucket count."""


def validate_bucket_count(size, label: str = "Bucket count") -> int:
    """Return `size` as a plain int, raising `SpreadError` unless it is >= 1.

    Accepts any integral value (numpy integer scalars included) but not bools.
    """

    if isinstance(size, bool) or not isinstance(size, Integral):
        raise SpreadError(f"{label} must be an integer, got {type(size).__name__}")
    if size < 1:
        raise SpreadError(f"{label} must be at least 1, got {size}")
    return int(size)


__all__ = ["SpreadError", "validate_bucket_count"]
