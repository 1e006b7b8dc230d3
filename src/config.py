"""
HN Sort Check — Configuration & Constants

Every URL, selector, timeout and retry count the validator uses lives here.
Values are read once at start (environment / .env override the defaults)
and are not changed while a validation pass runs.

Usage:
    from src.config import settings
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for the Hacker News sort validator.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # -----------------------------------------------------------------------
    # Target site
    # -----------------------------------------------------------------------
    HN_BASE_URL: str = "https://news.ycombinator.com/"
    HN_NEWEST_URL: str = "https://news.ycombinator.com/newest"

    # -----------------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------------
    ARTICLES_TO_VALIDATE: int = 150

    # -----------------------------------------------------------------------
    # Navigation (fixed retry count, fixed delay, no backoff)
    # -----------------------------------------------------------------------
    NAVIGATION_RETRIES: int = 3
    NAVIGATION_TIMEOUT_MS: int = 15000
    NAVIGATION_RETRY_DELAY_SECONDS: float = 2.0
    PAGE_LOAD_DELAY_SECONDS: float = 1.0        # Settle delay after each "more" click
    ROW_WAIT_TIMEOUT_MS: int = 15000

    # -----------------------------------------------------------------------
    # Browser
    # -----------------------------------------------------------------------
    HEADLESS: bool = False
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # -----------------------------------------------------------------------
    # Page structure (CSS selectors)
    # -----------------------------------------------------------------------
    ROW_SELECTOR: str = "tr.athing"
    AGE_SELECTOR: str = "span.age"
    MORE_LINK_SELECTOR: str = "a.morelink"

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"


# Singleton instance
settings = Settings()
