"""
Error taxonomy for listing extraction.

ExtractionFailure aborts a scrape. SectionExtractionFailure and
CacheFailure are recoverable and handled by the orchestrator.
"""

from __future__ import annotations


class ListingScraperError(Exception):
    """Base class for all listing scraper errors."""


class ExtractionFailure(ListingScraperError):
    """Session acquisition or the mandatory Availability section failed."""


class SectionExtractionFailure(ListingScraperError):
    """A best-effort section could not be extracted."""

    def __init__(self, section: str, message: str = ""):
        self.section = section
        super().__init__(f"{section}: {message}" if message else section)


class CacheFailure(ListingScraperError):
    """Cache store lookup or write failed for a reason other than 'not found'."""
