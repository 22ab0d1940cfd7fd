"""Round-robin distribution of an iterable across a fixed number of buckets.

Item *n* of the source lands in bucket *n mod bucket_count*. Two result shapes
are offered: a tuple whose length is fixed by the `Spreader` configuration and
a plain list sized at call time. Both go through the same single-pass loop, so
the source is consumed exactly once and in order. Dependencies: standard
library only, plus the local `utils` module for bucket-count validation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple, TypeVar

from iterspread.utils import SpreadError, validate_bucket_count

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpreadConfig:
    """Bucket count for a fixed-shape spread."""

    bucket_count: int

    def validate(self) -> None:
        """Reject zero, negative, or non-integral bucket counts."""

        validate_bucket_count(self.bucket_count)


def _spread_into(source: Iterable[T], size: int) -> List[List[T]]:
    """Single pass over `source`, appending each item to the next bucket.

    `size` must already be validated; the counter never leaves [0, size).
    """

    buckets: List[List[T]] = [[] for _ in range(size)]
    index = 0
    count = 0
    for item in source:
        buckets[index].append(item)
        index = (index + 1) % size
        count += 1
    logger.debug("Spread %d items across %d buckets", count, size)
    return buckets


class Spreader:
    """Distribute iterables across a bucket count fixed at construction."""

    def __init__(
        self, config: SpreadConfig | None = None, *, bucket_count: int | None = None
    ) -> None:
        if config is None:
            if bucket_count is None:
                raise SpreadError("Spreader requires a config or a bucket_count")
            config = SpreadConfig(bucket_count=bucket_count)
        config.validate()
        self._config = config
        self._size = int(config.bucket_count)

    @property
    def bucket_count(self) -> int:
        return self._size

    def spread(self, source: Iterable[T]) -> Tuple[List[T], ...]:
        """Return exactly `bucket_count` buckets as an immutable-length tuple."""

        return tuple(_spread_into(source, self._size))

    def spread_list(self, source: Iterable[T]) -> List[List[T]]:
        return _spread_into(source, self._size)


def spread_to_fixed(source: Iterable[T], n: int) -> Tuple[List[T], ...]:
    """Spread `source` round-robin into a tuple of exactly `n` lists.

    Raises `SpreadError` before touching `source` when `n` is not a positive
    integer. An empty source yields `n` empty lists.
    """

    return Spreader(bucket_count=n).spread(source)


def spread_to_sized(source: Iterable[T], size: int) -> List[List[T]]:
    """Spread `source` round-robin into a list of exactly `size` lists.

    Example: ``spread_to_sized([1, 2, 3, 4, 5], 3) == [[1, 4], [2, 5], [3]]``.
    """

    return _spread_into(source, validate_bucket_count(size))


__all__ = [
    "SpreadConfig",
    "SpreadError",
    "Spreader",
    "spread_to_fixed",
    "spread_to_sized",
]
