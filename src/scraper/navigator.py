"""
HN Sort Check — Navigator

Loads a URL in the injected Playwright page with a fixed number of attempts
and a fixed delay between them. No exponential backoff, no jitter.

Waits for DOMContentLoaded only; full resource load is not required to read
the listing table.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import structlog
from playwright.async_api import Error as PlaywrightError

from src.config import settings

logger = structlog.get_logger(__name__)

SleepFn = Callable[[float], Awaitable[Any]]


class NavigationError(Exception):
    """Raised when a URL could not be loaded within the allowed attempts."""

    def __init__(self, url: str, attempts: int) -> None:
        self.url = url
        self.attempts = attempts
        super().__init__(f"Failed to navigate to {url} after {attempts} attempts.")


async def navigate(
    page: Any,
    url: str,
    max_attempts: int | None = None,
    *,
    timeout_ms: int | None = None,
    retry_delay_seconds: float | None = None,
    sleep: SleepFn = asyncio.sleep,
) -> None:
    """
    Navigate ``page`` to ``url``, retrying on Playwright errors.

    Args:
        page: Playwright Page (or anything exposing an async ``goto``).
        url: Absolute URL to load.
        max_attempts: Total attempts, including the first (default: NAVIGATION_RETRIES).
        timeout_ms: Per-attempt timeout (default: NAVIGATION_TIMEOUT_MS).
        retry_delay_seconds: Fixed pause between attempts (default: NAVIGATION_RETRY_DELAY_SECONDS).
        sleep: Awaitable delay function, injectable for tests.

    Raises:
        NavigationError: Every attempt failed.
        ValueError: max_attempts < 1.
    """
    attempts = max_attempts if max_attempts is not None else settings.NAVIGATION_RETRIES
    timeout = timeout_ms if timeout_ms is not None else settings.NAVIGATION_TIMEOUT_MS
    delay = (
        retry_delay_seconds
        if retry_delay_seconds is not None
        else settings.NAVIGATION_RETRY_DELAY_SECONDS
    )

    if attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {attempts}")

    for attempt in range(1, attempts + 1):
        try:
            await page.goto(url, wait_until="domcontentloaded", timeout=timeout)
        except PlaywrightError as e:
            logger.warning(
                "navigation_attempt_failed",
                attempt=attempt,
                max_attempts=attempts,
                url=url,
                error=str(e),
                source="navigator",
            )
            if attempt < attempts:
                await sleep(delay)
            continue

        logger.info("navigation_succeeded", url=url, attempt=attempt, source="navigator")
        return

    raise NavigationError(url, attempts)
