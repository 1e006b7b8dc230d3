"""
HN Sort Check — Browser Session

Owns the single Playwright browser used for a validation pass. The browser
is closed on every exit path, including fatal navigation errors.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import structlog
from playwright.async_api import async_playwright

from src.config import Settings, settings as default_settings

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def browser_session(settings: Settings | None = None) -> AsyncIterator[Any]:
    """
    Launch Chromium, open a context with the configured user agent, yield a page.

    Usage:
        async with browser_session() as page:
            report = await runner.run(page)
    """
    cfg = settings or default_settings

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=cfg.HEADLESS)
        logger.info("browser_launched", headless=cfg.HEADLESS, source="browser")
        try:
            context = await browser.new_context(user_agent=cfg.USER_AGENT)
            page = await context.new_page()
            yield page
        finally:
            await browser.close()
            logger.info("browser_closed", source="browser")
