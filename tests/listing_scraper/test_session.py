"""
Tests for listing_scraper.session — browser lifecycle against a fake
Playwright driver.
"""

import asyncio

import pytest

from listing_scraper import session as session_mod
from listing_scraper.cache import MemoryListingCache
from listing_scraper.config import ScraperSettings
from listing_scraper.dom import PlaywrightPage
from listing_scraper.errors import ExtractionFailure
from listing_scraper.orchestrator import ListingScraper
from listing_scraper.session import open_session

ADDRESS = "https://www.apartments.com/the-maple-residences-austin-tx/abc123/"


def run(coro):
    return asyncio.run(coro)


class FakePage:
    def __init__(self, goto_error=None, title_error=None):
        self.goto_error = goto_error
        self.title_error = title_error
        self.goto_calls = []

    async def goto(self, url, **kwargs):
        self.goto_calls.append((url, kwargs))
        if self.goto_error:
            raise self.goto_error

    async def title(self):
        if self.title_error:
            raise self.title_error
        return "The Maple Residences"


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.context_kwargs = None
        self.closed = False

    async def new_context(self, **kwargs):
        self.context_kwargs = kwargs
        return self

    async def new_page(self):
        return self.page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser, launch_error=None):
        self.browser = browser
        self.launch_error = launch_error
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        if self.launch_error:
            raise self.launch_error
        return self.browser


class FakePlaywright:
    def __init__(self, chromium):
        self.chromium = chromium
        self.stopped = False

    async def stop(self):
        self.stopped = True


class FakeDriver:
    """Stands in for the object returned by async_playwright()."""

    def __init__(self, page=None, start_error=None, launch_error=None):
        self.page = page or FakePage()
        self.browser = FakeBrowser(self.page)
        self.playwright = FakePlaywright(FakeChromium(self.browser, launch_error))
        self.start_error = start_error

    async def start(self):
        if self.start_error:
            raise self.start_error
        return self.playwright


@pytest.fixture
def install_driver(monkeypatch):
    def install(driver):
        monkeypatch.setattr(session_mod, "async_playwright", lambda: driver)
        return driver

    return install


async def _open(settings=None, body=None):
    async with open_session(ADDRESS, settings) as page:
        if body:
            body(page)
        return page


class TestOpenSession:
    def test_navigates_on_dom_content_loaded(self, install_driver):
        driver = install_driver(FakeDriver())
        page = run(_open(ScraperSettings(navigation_timeout_ms=1234)))

        assert isinstance(page, PlaywrightPage)
        assert driver.page.goto_calls == [
            (ADDRESS, {"wait_until": "domcontentloaded", "timeout": 1234})
        ]
        assert driver.browser.closed
        assert driver.playwright.stopped

    def test_configured_identity(self, install_driver):
        driver = install_driver(FakeDriver())
        settings = ScraperSettings(user_agent="TestAgent/1.0", headless=False)
        run(_open(settings))

        launch = driver.playwright.chromium.launch_kwargs
        assert launch["headless"] is False
        assert "--user-agent=TestAgent/1.0" in launch["args"]
        assert driver.browser.context_kwargs == {
            "viewport": settings.viewport,
            "user_agent": "TestAgent/1.0",
        }

    def test_navigation_failure_closes_browser(self, install_driver):
        driver = install_driver(FakeDriver(FakePage(goto_error=RuntimeError("net::ERR_NAME"))))

        with pytest.raises(ExtractionFailure, match="Failed to navigate"):
            run(_open())
        assert driver.browser.closed
        assert driver.playwright.stopped

    def test_body_failure_closes_browser_and_propagates(self, install_driver):
        driver = install_driver(FakeDriver())

        def explode(page):
            raise KeyError("boom")

        with pytest.raises(KeyError):
            run(_open(body=explode))
        assert driver.browser.closed
        assert driver.playwright.stopped

    def test_launch_failure_stops_driver(self, install_driver):
        driver = install_driver(FakeDriver(launch_error=RuntimeError("missing chromium")))

        with pytest.raises(ExtractionFailure, match="Could not launch browser"):
            run(_open())
        assert driver.playwright.stopped

    def test_driver_start_failure(self, install_driver):
        install_driver(FakeDriver(start_error=RuntimeError("playwright driver not found")))

        with pytest.raises(ExtractionFailure, match="driver not found"):
            run(_open())

    def test_title_failure_does_not_abort(self, install_driver):
        driver = install_driver(FakeDriver(FakePage(title_error=RuntimeError("detached"))))
        page = run(_open())

        assert isinstance(page, PlaywrightPage)
        assert driver.browser.closed


class TestScrapeWithBrowserSession:
    def test_driver_start_failure_surfaces_as_extraction_failure(self, install_driver):
        install_driver(FakeDriver(start_error=RuntimeError("playwright driver not found")))
        scraper = ListingScraper(cache=MemoryListingCache())

        with pytest.raises(ExtractionFailure):
            run(scraper.scrape(ADDRESS))
