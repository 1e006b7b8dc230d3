"""
HN Sort Check — Validation Runner

Drives pagination over the listing until enough timestamps are collected
or the "more" link runs out, then checks descending order.

Loop (COLLECTING -> DONE):
1. Wait for a listing row on the current page
2. Extract up to (target - collected) timestamps
3. Count the page
4. Still short: follow the "more" link, or stop when there is none

Collected timestamps are truncated to the target only after the loop ends.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urljoin

import structlog

from src.config import Settings, settings as default_settings
from src.engine.sort_check import first_inversion, truncate
from src.scraper.extractor import extract_timestamps
from src.scraper.navigator import SleepFn, navigate
from src.validator import ValidationReport, Verdict

logger = structlog.get_logger(__name__)


def resolve_next_page_url(href: str, base_url: str) -> str:
    """Resolve a "more" link href against the site origin. Absolute hrefs pass through."""
    if not base_url.endswith("/"):
        base_url = base_url + "/"
    return urljoin(base_url, href)


class ValidationRunner:
    """
    Runs one sort validation pass against an injected page.

    Usage:
        runner = ValidationRunner()
        report = await runner.run(page)
    """

    def __init__(self, settings: Settings | None = None, sleep: SleepFn = asyncio.sleep) -> None:
        self.settings = settings or default_settings
        self.sleep = sleep

    @property
    def target_count(self) -> int:
        return self.settings.ARTICLES_TO_VALIDATE

    async def run(self, page: Any) -> ValidationReport:
        """
        Load the newest listing, collect timestamps and evaluate them.

        Raises:
            NavigationError: A page could not be loaded within the retry budget.
        """
        logger.info(
            "validation_started",
            url=self.settings.HN_NEWEST_URL,
            target_count=self.target_count,
            source="validation_runner",
        )
        await self._goto(page, self.settings.HN_NEWEST_URL)
        timestamps, pages_visited = await self.collect(page)
        return self.evaluate(timestamps, pages_visited)

    async def collect(self, page: Any) -> tuple[list[int], int]:
        """
        Collect timestamps across pages, starting from the page already loaded.

        Returns:
            (timestamps, pages_visited). Timestamps are not truncated here.
        """
        timestamps: list[int] = []
        pages_visited = 0

        while len(timestamps) < self.target_count:
            await page.wait_for_selector(
                self.settings.ROW_SELECTOR,
                timeout=self.settings.ROW_WAIT_TIMEOUT_MS,
            )
            page_timestamps = await extract_timestamps(page, self.target_count - len(timestamps))
            timestamps.extend(page_timestamps)
            pages_visited += 1

            logger.info(
                "validation_page_collected",
                page=pages_visited,
                page_timestamps=len(page_timestamps),
                collected=len(timestamps),
                source="validation_runner",
            )

            if len(timestamps) >= self.target_count:
                break

            next_url = await self._next_page_url(page)
            if next_url is None:
                logger.info(
                    "validation_pages_exhausted",
                    pages_visited=pages_visited,
                    collected=len(timestamps),
                    source="validation_runner",
                )
                break

            await self._goto(page, next_url)
            await self.sleep(self.settings.PAGE_LOAD_DELAY_SECONDS)

        return timestamps, pages_visited

    def evaluate(self, timestamps: list[int], pages_visited: int) -> ValidationReport:
        """Truncate to the target count and classify the sequence."""
        checked = truncate(timestamps, self.target_count)
        violation = first_inversion(checked)

        if len(checked) < self.target_count:
            verdict = Verdict.INSUFFICIENT
        elif violation is None:
            verdict = Verdict.SORTED
        else:
            verdict = Verdict.NOT_SORTED

        logger.info(
            "validation_complete",
            pages_visited=pages_visited,
            articles_checked=len(checked),
            verdict=verdict.value,
            first_violation_index=violation,
            source="validation_runner",
        )

        return ValidationReport(
            pages_visited=pages_visited,
            articles_checked=len(checked),
            target_count=self.target_count,
            verdict=verdict,
            first_violation_index=violation,
            timestamps=checked,
            checked_at=datetime.now(timezone.utc),
        )

    async def _next_page_url(self, page: Any) -> str | None:
        """Absolute URL of the "more" link, or None when pagination ends."""
        more_link = await page.query_selector(self.settings.MORE_LINK_SELECTOR)
        if more_link is None:
            return None
        href = await more_link.get_attribute("href")
        if not href:
            logger.warning("validation_more_link_without_href", source="validation_runner")
            return None
        return resolve_next_page_url(href, self.settings.HN_BASE_URL)

    async def _goto(self, page: Any, url: str) -> None:
        await navigate(
            page,
            url,
            self.settings.NAVIGATION_RETRIES,
            timeout_ms=self.settings.NAVIGATION_TIMEOUT_MS,
            retry_delay_seconds=self.settings.NAVIGATION_RETRY_DELAY_SECONDS,
            sleep=self.sleep,
        )
