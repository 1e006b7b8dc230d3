"""HN Sort Check — Scraper Layer (navigation, extraction, browser session)"""

from src.scraper.extractor import (
    RowPair,
    collect_row_pairs,
    extract_timestamps,
    parse_age_title,
    timestamps_from_pairs,
)
from src.scraper.navigator import NavigationError, navigate

__all__ = [
    "NavigationError",
    "RowPair",
    "collect_row_pairs",
    "extract_timestamps",
    "navigate",
    "parse_age_title",
    "timestamps_from_pairs",
]
