"""
HN Sort Check — Timestamp Extractor

Reads story timestamps from the currently loaded listing page.

Page structure relied on:
    <tr class="athing">...</tr>                 listing row
    <tr><td class="subtext">                    metadata row (next sibling)
        <span class="age" title="2024-05-01T12:00:00 1714564800">...</span>

The row/metadata coupling goes through ``collect_row_pairs`` so the
extraction rules in ``timestamps_from_pairs`` can run against synthetic
pairs. Rows with a missing metadata row, a missing age span or a malformed
title are skipped silently.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Sequence

import structlog

from src.config import settings

logger = structlog.get_logger(__name__)


class RowPair(NamedTuple):
    """A listing row and the metadata row that follows it (None when absent)."""
    row: Any
    metadata: Any | None


def parse_age_title(title: str | None) -> int | None:
    """
    Parse the unix timestamp out of an age span's title attribute.

    The title reads "<iso datetime> <unix seconds>", e.g.
    "2024-05-01T12:00:00 1714564800".

    Returns:
        The unix timestamp, or None when the title is empty, has fewer than
        two space-separated tokens, or the second token is not an integer.
    """
    if not title:
        return None
    parts = title.split(" ")
    if len(parts) < 2:
        return None
    try:
        return int(parts[1], 10)
    except ValueError:
        return None


async def collect_row_pairs(page: Any, row_selector: str | None = None) -> list[RowPair]:
    """
    Pair every listing row on the page with its next element sibling.

    Args:
        page: Playwright Page with a listing loaded.
        row_selector: CSS selector for listing rows (default: ROW_SELECTOR).

    Returns:
        Pairs in document order.
    """
    selector = row_selector or settings.ROW_SELECTOR
    rows = await page.query_selector_all(selector)

    pairs: list[RowPair] = []
    for row in rows:
        handle = await row.evaluate_handle("el => el.nextElementSibling")
        pairs.append(RowPair(row=row, metadata=handle.as_element()))
    return pairs


async def timestamps_from_pairs(
    pairs: Sequence[RowPair],
    remaining_count: int,
    age_selector: str | None = None,
) -> list[int]:
    """
    Derive up to ``remaining_count`` timestamps from row pairs, in order.

    Args:
        pairs: Output of ``collect_row_pairs`` (or synthetic equivalents).
        remaining_count: Maximum number of timestamps to return.
        age_selector: CSS selector for the age span (default: AGE_SELECTOR).

    Returns:
        At most ``remaining_count`` timestamps.
    """
    selector = age_selector or settings.AGE_SELECTOR
    timestamps: list[int] = []
    skipped = 0

    for pair in pairs:
        if len(timestamps) >= remaining_count:
            break
        if pair.metadata is None:
            skipped += 1
            continue
        age = await pair.metadata.query_selector(selector)
        if age is None:
            skipped += 1
            continue
        timestamp = parse_age_title(await age.get_attribute("title"))
        if timestamp is None:
            skipped += 1
            continue
        timestamps.append(timestamp)

    if skipped:
        logger.debug("extractor_rows_skipped", skipped=skipped, source="extractor")
    return timestamps


async def extract_timestamps(page: Any, remaining_count: int) -> list[int]:
    """
    Extract up to ``remaining_count`` story timestamps from the loaded page.

    Returns fewer when the page has fewer qualifying rows. Does not navigate.
    """
    if remaining_count <= 0:
        return []

    pairs = await collect_row_pairs(page)
    timestamps = await timestamps_from_pairs(pairs, remaining_count)

    logger.info(
        "extractor_page_done",
        rows=len(pairs),
        timestamps=len(timestamps),
        remaining_count=remaining_count,
        source="extractor",
    )
    return timestamps
