"""
HN Sort Check — Descending Order Check

Pure functions over the collected timestamp sequence. Evaluated once on
the final, truncated sequence, never incrementally during collection.

Ordering rule (non-strict):
    descending  <=>  seq[i] >= seq[i + 1] for every adjacent pair

Equal neighbours are allowed (two stories submitted in the same second).
"""

from __future__ import annotations

from typing import Sequence

import structlog

logger = structlog.get_logger(__name__)


def truncate(seq: Sequence[int], limit: int) -> list[int]:
    """Return the first ``limit`` items. Shorter sequences come back unchanged."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return list(seq[:limit])


def first_inversion(seq: Sequence[int]) -> int | None:
    """
    Find the first adjacent pair that breaks descending order.

    Args:
        seq: Unix timestamps in page order (newest expected first).

    Returns:
        Index ``i`` such that ``seq[i] < seq[i + 1]``, or None when the
        sequence is descending. Empty and single-item sequences return None.
    """
    for i in range(len(seq) - 1):
        if seq[i] < seq[i + 1]:
            logger.debug(
                "sort_inversion_found",
                index=i,
                current=seq[i],
                following=seq[i + 1],
                source="sort_check",
            )
            return i
    return None


def is_sorted_descending(seq: Sequence[int]) -> bool:
    """True when no adjacent pair is ascending. Vacuously true for 0 or 1 items."""
    return first_inversion(seq) is None
