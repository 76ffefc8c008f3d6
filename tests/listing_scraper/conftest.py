"""
Shared fixtures for listing scraper tests.

Loads saved listing pages from fixtures/ and wraps them in HtmlPage so
extractors run without a browser.
"""

import os
import sys
from contextlib import asynccontextmanager

import pytest

_scripts_dir = os.path.join(os.path.dirname(__file__), "..", "..", "scripts")
if _scripts_dir not in sys.path:
    sys.path.insert(0, _scripts_dir)

from listing_scraper.dom import HtmlPage  # noqa: E402

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
LISTING_URL = "https://www.apartments.com/the-maple-residences-austin-tx/abc123/"


def load_fixture(filename: str) -> str:
    path = os.path.join(FIXTURES_DIR, filename)
    if not os.path.exists(path):
        pytest.skip(f"Fixture file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return f.read()


class FakeSessions:
    """Session factory serving fixture HTML; counts how often a page is opened."""

    def __init__(self, pages: dict):
        self.pages = pages
        self.opened: list[str] = []
        self.closed: list[str] = []

    def __call__(self, address, settings):
        return self._session(address)

    @asynccontextmanager
    async def _session(self, address):
        self.opened.append(address)
        try:
            yield HtmlPage(self.pages[address], url=address)
        finally:
            self.closed.append(address)


@pytest.fixture
def listing_html():
    return load_fixture("listing.html")


@pytest.fixture
def empty_html():
    return load_fixture("empty.html")


@pytest.fixture
def listing_page(listing_html):
    return HtmlPage(listing_html, url=LISTING_URL)


@pytest.fixture
def empty_page(empty_html):
    return HtmlPage(empty_html, url=LISTING_URL)


@pytest.fixture
def sessions(listing_html, empty_html):
    return FakeSessions({
        LISTING_URL: listing_html,
        "https://www.apartments.com/empty/": empty_html,
    })


@pytest.fixture
def listing_url():
    return LISTING_URL


@pytest.fixture
def make_sessions():
    return FakeSessions
