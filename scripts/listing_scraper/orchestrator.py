"""
Extraction Orchestrator

Cache lookup → page session → section extractors → record assembly →
cache write. Only session acquisition and the Availability section are
fatal; every other section is best-effort.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from .cache import FileListingCache, ListingCache
from .config import ScraperSettings
from .errors import CacheFailure, SectionExtractionFailure
from .extractors import AvailabilityExtractor, SectionExtractor
from .registry import optional_extractors
from .schema import ListingRecord
from .session import open_session

logger = logging.getLogger(__name__)


class ListingScraper:
    """
    Scrape one listing page per address, cache-first.

    Collaborators are passed in explicitly:
    - cache: ListingCache (defaults to a FileListingCache in settings.cache_dir)
    - session_factory: (address, settings) → async context manager yielding
      a PageHandle (defaults to a Playwright browser session)
    - extractors: best-effort section extractors, run in order after
      Availability (defaults to contact info, amenities, fees & policies)

    Safe to call concurrently for different addresses; each call owns its
    own session.
    """

    def __init__(
        self,
        cache: Optional[ListingCache] = None,
        settings: Optional[ScraperSettings] = None,
        session_factory: Callable = open_session,
        extractors: Optional[Sequence[SectionExtractor]] = None,
    ):
        self.settings = settings or ScraperSettings()
        self.cache = cache if cache is not None else FileListingCache(self.settings.cache_dir)
        self.session_factory = session_factory
        self.availability = AvailabilityExtractor(wait_timeout_ms=self.settings.wait_timeout_ms)
        self.extractors = (
            list(extractors)
            if extractors is not None
            else optional_extractors(self.settings.wait_timeout_ms)
        )

    async def scrape(self, address: str, requested_by: str = "") -> ListingRecord:
        """
        Return the listing record for ``address``.

        Raises ExtractionFailure if the page could not be opened or the
        Availability section could not be read.
        """
        logger.info("Processing listing request for: %s", address)

        cached = self._lookup(address)
        if cached is not None:
            logger.info("Found cached data for %s", address)
            return cached

        logger.info("No cached data, scraping %s", address)
        async with self.session_factory(address, self.settings) as page:
            availability = await self.availability.extract(page)

            sections = {}
            for extractor in self.extractors:
                try:
                    sections[extractor.section] = await extractor.extract(page)
                    logger.info("Extracted %s", extractor.section)
                except SectionExtractionFailure as e:
                    logger.warning("Could not extract %s: %s", extractor.section, e)

        record = ListingRecord.assemble(
            availability,
            contact_info=sections.get("contact_info"),
            amenities=sections.get("amenities"),
            fees_and_policies=sections.get("fees_and_policies"),
        )

        try:
            self.cache.put(address, record, requested_by)
        except CacheFailure as e:
            logger.warning("Could not save %s to cache: %s", address, e)

        logger.info("Finished scraping %s (%s)", address, record.property_name)
        return record

    def _lookup(self, address: str) -> Optional[ListingRecord]:
        try:
            return self.cache.get(address)
        except CacheFailure as e:
            logger.warning("Cache lookup failed, treating as miss: %s", e)
            return None


async def scrape_listing(
    address: str,
    requested_by: str = "",
    settings: Optional[ScraperSettings] = None,
) -> ListingRecord:
    """Scrape ``address`` with default collaborators built from ``settings``."""
    return await ListingScraper(settings=settings).scrape(address, requested_by)
