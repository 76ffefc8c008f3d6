"""
Interaction Sequencer

The minimal page interactions extractors need before reading: scroll to
trigger lazy rendering, click optional toggles, then settle until the
expected content is present.
"""

from __future__ import annotations

import logging
from typing import Optional

from .dom import PageHandle

logger = logging.getLogger(__name__)

SCROLL_STEP_PX = 1200


async def scroll_page(page: PageHandle, dy: int = SCROLL_STEP_PX) -> None:
    """Scroll the viewport down by ``dy`` pixels to trigger lazy loading."""
    await page.scroll_by(dy)


async def click_if_present(page: PageHandle, query: str, trusted: bool = True) -> bool:
    """
    Click the first element matching ``query``.

    Returns True if an element was found and clicked. Click errors are
    logged and reported as False; a missing toggle is not an error.
    """
    element = await page.locate_first(query)
    if element is None:
        return False
    try:
        await page.click(element, trusted=trusted)
    except Exception as e:
        logger.debug("Click on %s failed: %s", query, e)
        return False
    return True


async def settle(
    page: PageHandle,
    condition: Optional[str] = None,
    timeout_ms: int = 3000,
    fallback_ms: int = 250,
) -> bool:
    """
    Wait for rendering to finish after an interaction.

    With a ``condition`` query, wait until it matches or ``timeout_ms``
    elapses; a timeout is logged and extraction carries on with whatever
    rendered. Without one, pause for ``fallback_ms``.
    """
    if not condition:
        await page.pause(fallback_ms)
        return True
    found = await page.wait_for(condition, timeout_ms)
    if not found:
        logger.debug("Timed out after %dms waiting for %s", timeout_ms, condition)
    return found
