"""
Listing Scraper Package

Extracts structured apartment-listing data (pricing grid, contact info,
amenities, fees & policies) from one rendered listing page and caches it
by source address.
"""

from .schema import (
    ListingRecord, ModelCard, UnitRow, ContactInfo, AmenitiesResult,
    FeesPoliciesResult, ScrapeResponse,
)
from .errors import ExtractionFailure, SectionExtractionFailure, CacheFailure
from .cache import ListingCache, FileListingCache, MemoryListingCache
from .config import ScraperSettings
from .dom import PageHandle, PlaywrightPage, HtmlPage
from .session import open_session
from .orchestrator import ListingScraper, scrape_listing
from .registry import detect_site, get_extractor, available_sections

__all__ = [
    "ListingRecord",
    "ModelCard",
    "UnitRow",
    "ContactInfo",
    "AmenitiesResult",
    "FeesPoliciesResult",
    "ScrapeResponse",
    "ExtractionFailure",
    "SectionExtractionFailure",
    "CacheFailure",
    "ListingCache",
    "FileListingCache",
    "MemoryListingCache",
    "ScraperSettings",
    "PageHandle",
    "PlaywrightPage",
    "HtmlPage",
    "open_session",
    "ListingScraper",
    "scrape_listing",
    "detect_site",
    "get_extractor",
    "available_sections",
]
