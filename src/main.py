"""
HN Sort Check — Application Entrypoint

Configures structlog, opens a browser session and runs one validation pass
over Hacker News "newest". The report goes to stdout; logs and fatal errors
go to stderr.

Run via:
    python -m src.main
"""

from __future__ import annotations

import asyncio
import logging
import sys

import structlog

from src.config import settings
from src.scraper.browser import browser_session
from src.validator.report import format_report
from src.validator.runner import ValidationRunner


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "INFO") -> None:
    """
    Set up structured logging with JSON output on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Validation Pass
# ---------------------------------------------------------------------------


async def main() -> int:
    """
    Run one validation pass.

    Returns:
        Process exit status: 0 when a report was produced (whatever the
        verdict), 1 when the run aborted on a fatal error.
    """
    _configure_logging(log_level=settings.LOG_LEVEL)
    logger = structlog.get_logger(__name__)

    runner = ValidationRunner()
    try:
        async with browser_session() as page:
            report = await runner.run(page)
    except Exception as e:
        logger.error(
            "validation_fatal_error",
            error=str(e),
            error_type=type(e).__name__,
            source="main",
        )
        print(f"[FATAL ERROR] {e}", file=sys.stderr)
        return 1

    print(format_report(report))
    return 0


def run() -> None:
    """Console-script entry (``hn-sort-check``)."""
    sys.exit(asyncio.run(main()))


# ---------------------------------------------------------------------------
# CLI Entry
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    run()
