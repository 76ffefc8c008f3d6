"""
Page Handles

Extractors talk to a rendered page only through PageHandle: locate
elements by CSS query, read their text and attributes, and perform the
few interactions (click, scroll, wait) the listing page needs.

PlaywrightPage wraps a live Playwright page. HtmlPage wraps a
BeautifulSoup tree parsed from saved HTML; it records interactions
instead of rendering them, which is enough for static snapshots and tests.
"""

from __future__ import annotations

import asyncio
import re
from abc import ABC, abstractmethod
from typing import Any, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class PageHandle(ABC):
    """Structured-extraction capability over one rendered page."""

    url: str = ""

    @abstractmethod
    async def locate(self, query: str, root: Any = None) -> list:
        """Return all elements matching ``query`` under ``root`` (document if None)."""
        ...

    async def locate_first(self, query: str, root: Any = None):
        matches = await self.locate(query, root)
        return matches[0] if matches else None

    @abstractmethod
    async def by_id(self, element_id: str):
        ...

    @abstractmethod
    async def read_text(self, element) -> Optional[str]:
        """Raw text content of ``element`` (None for a missing element)."""
        ...

    @abstractmethod
    async def read_attribute(self, element, name: str) -> Optional[str]:
        ...

    @abstractmethod
    async def has_class(self, element, name: str) -> bool:
        ...

    @abstractmethod
    async def read_property(self, element, name: str) -> Any:
        """
        Read a resolved element property.

        ``href`` and ``src`` are absolute URLs; ``width`` and ``height``
        are integers (0 when unknown).
        """
        ...

    @abstractmethod
    async def read_style(self, element, name: str) -> str:
        """Inline style value for a camelCase CSS property, "" if unset."""
        ...

    @abstractmethod
    async def parent(self, element):
        ...

    @abstractmethod
    async def click(self, element, trusted: bool = True) -> None:
        """
        Click ``element``.

        trusted=True performs a real pointer click; trusted=False only
        dispatches the element's click activation, which also works for
        elements that are not visible.
        """
        ...

    @abstractmethod
    async def reveal(self, element) -> None:
        """Remove the ``hidden`` attribute so the element renders."""
        ...

    @abstractmethod
    async def scroll_by(self, dy: int) -> None:
        ...

    @abstractmethod
    async def wait_for(self, query: str, timeout_ms: int) -> bool:
        """Wait until ``query`` matches an element. False on timeout."""
        ...

    @abstractmethod
    async def pause(self, ms: int) -> None:
        ...

    @abstractmethod
    async def title(self) -> str:
        ...


# ---------------------------------------------------------------------------
# Playwright
# ---------------------------------------------------------------------------

_READ_PROPERTY_JS = """(e, name) => {
    const v = e[name];
    return (v === undefined || v === null) ? null : v;
}"""


class PlaywrightPage(PageHandle):
    """PageHandle backed by a live Playwright page and its element handles."""

    def __init__(self, page):
        self.page = page

    @property
    def url(self) -> str:
        return self.page.url

    async def locate(self, query: str, root: Any = None) -> list:
        target = root if root is not None else self.page
        return await target.query_selector_all(query)

    async def by_id(self, element_id: str):
        if not element_id:
            return None
        handle = await self.page.evaluate_handle(
            "(id) => document.getElementById(id)", element_id
        )
        return handle.as_element()

    async def read_text(self, element) -> Optional[str]:
        if element is None:
            return None
        return await element.text_content()

    async def read_attribute(self, element, name: str) -> Optional[str]:
        if element is None:
            return None
        return await element.get_attribute(name)

    async def has_class(self, element, name: str) -> bool:
        return await element.evaluate("(e, n) => e.classList.contains(n)", name)

    async def read_property(self, element, name: str) -> Any:
        if element is None:
            return None
        return await element.evaluate(_READ_PROPERTY_JS, name)

    async def read_style(self, element, name: str) -> str:
        if element is None:
            return ""
        return await element.evaluate("(e, n) => (e.style && e.style[n]) || ''", name)

    async def parent(self, element):
        handle = await element.evaluate_handle("(e) => e.parentElement")
        return handle.as_element()

    async def click(self, element, trusted: bool = True) -> None:
        if trusted:
            await element.click()
        else:
            await element.evaluate("(e) => e.click()")

    async def reveal(self, element) -> None:
        await element.evaluate("(e) => e.removeAttribute('hidden')")

    async def scroll_by(self, dy: int) -> None:
        await self.page.evaluate("(dy) => window.scrollBy(0, dy)", dy)

    async def wait_for(self, query: str, timeout_ms: int) -> bool:
        try:
            await self.page.wait_for_selector(query, state="attached", timeout=timeout_ms)
            return True
        except PlaywrightTimeoutError:
            return False

    async def pause(self, ms: int) -> None:
        await self.page.wait_for_timeout(ms)

    async def title(self) -> str:
        return await self.page.title()


# ---------------------------------------------------------------------------
# Static HTML
# ---------------------------------------------------------------------------

_STYLE_DECL_RE = re.compile(r"\s*([-a-zA-Z]+)\s*:\s*(.+?)\s*(?:;|$)")


def _css_property_name(camel: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", camel).lower()


class HtmlPage(PageHandle):
    """
    PageHandle over a BeautifulSoup tree.

    Clicks and scrolls are recorded in ``clicked`` and ``scrolled`` rather
    than executed; waits succeed immediately when the query already matches.
    """

    def __init__(self, html: str, url: str = ""):
        self.soup = BeautifulSoup(html, "html.parser")
        self.url = url
        self.clicked: list[Tag] = []
        self.scrolled: list[int] = []
        self.paused_ms = 0

    async def locate(self, query: str, root: Any = None) -> list:
        target = root if root is not None else self.soup
        return target.select(query)

    async def by_id(self, element_id: str):
        if not element_id:
            return None
        return self.soup.find(id=element_id)

    async def read_text(self, element) -> Optional[str]:
        if element is None:
            return None
        return element.get_text()

    async def read_attribute(self, element, name: str) -> Optional[str]:
        if element is None:
            return None
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    async def has_class(self, element, name: str) -> bool:
        return name in (element.get("class") or [])

    async def read_property(self, element, name: str) -> Any:
        if element is None:
            return None
        if name in ("href", "src"):
            value = element.get(name)
            return urljoin(self.url, value) if value else ""
        if name in ("width", "height"):
            try:
                return int(element.get(name) or 0)
            except ValueError:
                return 0
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    async def read_style(self, element, name: str) -> str:
        if element is None:
            return ""
        wanted = _css_property_name(name)
        for prop, value in _STYLE_DECL_RE.findall(element.get("style") or ""):
            if prop.lower() == wanted:
                return value
        return ""

    async def parent(self, element):
        return element.parent

    async def click(self, element, trusted: bool = True) -> None:
        self.clicked.append(element)

    async def reveal(self, element) -> None:
        if element.has_attr("hidden"):
            del element["hidden"]

    async def scroll_by(self, dy: int) -> None:
        self.scrolled.append(dy)

    async def wait_for(self, query: str, timeout_ms: int) -> bool:
        await asyncio.sleep(0)
        return bool(self.soup.select(query))

    async def pause(self, ms: int) -> None:
        self.paused_ms += ms
        await asyncio.sleep(0)

    async def title(self) -> str:
        return self.soup.title.get_text() if self.soup.title else ""
