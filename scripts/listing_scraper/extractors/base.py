"""
Base Section Extractor

Shared shape for the four listing section extractors: an optional page
preparation step followed by a selector pipeline that reads the section.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..dom import PageHandle
from ..errors import ExtractionFailure, SectionExtractionFailure
from ..text import clean

logger = logging.getLogger(__name__)


class SectionExtractor(ABC):
    """
    Abstract base class for section extractors.

    Subclasses must implement:
    - section: record field this extractor fills (e.g., "contact_info")
    - parse(): read the section from an already prepared page

    required extractors raise ExtractionFailure on error, the rest raise
    SectionExtractionFailure so the orchestrator can skip them.
    """

    section: str = ""
    required: bool = False

    def __init__(self, wait_timeout_ms: int = 3000):
        self.wait_timeout_ms = wait_timeout_ms

    async def prepare(self, page: PageHandle) -> None:
        """
        Page interactions needed before parsing.

        Override to click toggles, scroll, etc. Default: nothing.
        """

    @abstractmethod
    async def parse(self, page: PageHandle) -> Any:
        ...

    async def extract(self, page: PageHandle) -> Any:
        """Prepare the page and parse the section, wrapping failures."""
        try:
            await self.prepare(page)
            return await self.parse(page)
        except Exception as e:
            # Optional sections only ever raise SectionExtractionFailure.
            if self.required:
                if isinstance(e, ExtractionFailure):
                    raise
                raise ExtractionFailure(f"{self.section} extraction failed: {e}") from e
            if isinstance(e, SectionExtractionFailure):
                raise
            raise SectionExtractionFailure(self.section, str(e)) from e

    # -- selector helpers ---------------------------------------------------

    async def text_of(self, page: PageHandle, query: str, root: Any = None) -> str:
        """Cleaned text of the first match of ``query``, "" if none."""
        element = await page.locate_first(query, root)
        return clean(await page.read_text(element))

    async def texts_of(self, page: PageHandle, query: str, root: Any = None) -> list[str]:
        """Cleaned text of every match of ``query``, in document order."""
        return [clean(await page.read_text(el)) for el in await page.locate(query, root)]
