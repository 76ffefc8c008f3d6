"""
Page Session Manager

Owns the headless browser for one scrape: launch, navigate, hand the page
to the extractors, and close the browser on every exit path.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import async_playwright

from .config import ScraperSettings
from .dom import PageHandle, PlaywrightPage
from .errors import ExtractionFailure

logger = logging.getLogger(__name__)


async def create_browser(playwright, settings: ScraperSettings):
    """Create a browser + context + page with the configured identity."""
    browser = await playwright.chromium.launch(
        headless=settings.headless,
        args=[f"--user-agent={settings.user_agent}"],
    )
    context = await browser.new_context(
        viewport=settings.viewport,
        user_agent=settings.user_agent,
    )
    page = await context.new_page()
    return browser, context, page


@asynccontextmanager
async def open_session(
    address: str, settings: Optional[ScraperSettings] = None
) -> AsyncIterator[PageHandle]:
    """
    Open a page at ``address`` and yield it as a PageHandle.

    Navigation only waits for DOMContentLoaded; extractors wait for the
    specific elements they need. Driver start, launch and navigation errors
    raise ExtractionFailure. The browser is closed however the block exits.
    """
    settings = settings or ScraperSettings()
    try:
        playwright = await async_playwright().start()
    except Exception as e:
        raise ExtractionFailure(f"Could not start Playwright: {e}") from e

    try:
        try:
            browser, _context, page = await create_browser(playwright, settings)
        except Exception as e:
            raise ExtractionFailure(f"Could not launch browser: {e}") from e

        try:
            try:
                await page.goto(
                    address,
                    wait_until="domcontentloaded",
                    timeout=settings.navigation_timeout_ms,
                )
            except Exception as e:
                raise ExtractionFailure(f"Failed to navigate to {address}: {e}") from e

            handle = PlaywrightPage(page)
            await _log_title(handle)
            yield handle
        finally:
            await browser.close()
    finally:
        await playwright.stop()


async def _log_title(handle: PageHandle) -> None:
    try:
        logger.info("Page title: %s", await handle.title())
    except Exception as e:
        logger.debug("Could not read page title: %s", e)
