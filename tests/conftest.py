"""
HN Sort Check — Shared pytest Fixtures & Configuration

Provides a fake Playwright page/element surface so the validator can be
exercised against synthetic Hacker News listings without a browser:
- FakeElement / FakeHandle: query_selector, get_attribute, evaluate_handle
- FakePage: goto, wait_for_selector, query_selector(_all)
- build_listing(): rows + metadata rows for a list of timestamps
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock

import pytest
from playwright.async_api import Error as PlaywrightError

from src.config import Settings


NEWEST_URL = "https://news.ycombinator.com/newest"


# ---------------------------------------------------------------------------
# Fake Playwright surface
# ---------------------------------------------------------------------------


class FakeHandle:
    """Stand-in for a JSHandle returned by evaluate_handle()."""

    def __init__(self, element: FakeElement | None) -> None:
        self._element = element

    def as_element(self) -> FakeElement | None:
        return self._element


class FakeElement:
    """Element with attributes, child lookups by selector and a next sibling."""

    def __init__(
        self,
        attrs: dict[str, str] | None = None,
        children: dict[str, FakeElement] | None = None,
    ) -> None:
        self.attrs = attrs or {}
        self.children = children or {}
        self.next_sibling: FakeElement | None = None

    async def query_selector(self, selector: str) -> FakeElement | None:
        return self.children.get(selector)

    async def get_attribute(self, name: str) -> str | None:
        return self.attrs.get(name)

    async def evaluate_handle(self, expression: str) -> FakeHandle:
        assert "nextElementSibling" in expression
        return FakeHandle(self.next_sibling)


@dataclass
class FakeListing:
    """One rendered listing page."""
    rows: list[FakeElement]
    more_href: str | None = None
    has_more_link: bool = False


def age_row(title: str | None) -> FakeElement:
    """Metadata row holding a span.age with the given title (no span when None)."""
    if title is None:
        return FakeElement()
    return FakeElement(children={"span.age": FakeElement(attrs={"title": title})})


def link_rows(pairs: list[tuple[FakeElement, FakeElement | None]]) -> list[FakeElement]:
    """Attach each metadata row as the next sibling of its listing row."""
    rows = []
    for row, metadata in pairs:
        row.next_sibling = metadata
        rows.append(row)
    return rows


def build_listing(
    timestamps: list[int],
    more_href: str | None = None,
) -> FakeListing:
    """Listing page whose rows carry the given timestamps, in order."""
    rows = link_rows([
        (FakeElement(attrs={"class": "athing"}), age_row(f"2024-05-01T12:00:00 {ts}"))
        for ts in timestamps
    ])
    return FakeListing(rows=rows, more_href=more_href, has_more_link=more_href is not None)


@dataclass
class FakePage:
    """Page that serves FakeListings by URL and can fail goto() on demand."""
    listings: dict[str, FakeListing] = field(default_factory=dict)
    goto_failures: dict[str, int] = field(default_factory=dict)
    visited: list[str] = field(default_factory=list)
    current: FakeListing | None = None

    async def goto(self, url: str, wait_until: str = "load", timeout: int = 0) -> None:
        self.visited.append(url)
        if self.goto_failures.get(url, 0) > 0:
            self.goto_failures[url] -= 1
            raise PlaywrightError(f"net::ERR_CONNECTION_RESET at {url}")
        if url not in self.listings:
            raise PlaywrightError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.current = self.listings[url]

    async def wait_for_selector(self, selector: str, timeout: int = 0) -> FakeElement | None:
        assert self.current is not None and self.current.rows
        return self.current.rows[0]

    async def query_selector_all(self, selector: str) -> list[FakeElement]:
        assert self.current is not None
        return list(self.current.rows)

    async def query_selector(self, selector: str) -> FakeElement | None:
        assert self.current is not None
        if not self.current.has_more_link:
            return None
        attrs = {"href": self.current.more_href} if self.current.more_href else {}
        return FakeElement(attrs=attrs)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Default settings with a fixed target of 150 articles."""
    return Settings(ARTICLES_TO_VALIDATE=150, HEADLESS=True)


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Instant replacement for asyncio.sleep."""
    return AsyncMock()


@pytest.fixture
def descending() -> Any:
    """Factory for strictly descending timestamp runs."""
    def _make(count: int, start: int = 1_714_600_000, step: int = 60) -> list[int]:
        return [start - i * step for i in range(count)]
    return _make
