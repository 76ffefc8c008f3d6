"""
Extractor Registry

Maps record sections to their extractor classes, and listing URLs to the
site whose page shape the extractors understand.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from .extractors import (
    AmenitiesExtractor,
    AvailabilityExtractor,
    ContactInfoExtractor,
    FeesPoliciesExtractor,
    SectionExtractor,
)

# Hostname → site id
_SITE_HOSTS: dict[str, str] = {
    "apartments.com": "apartments",
    "www.apartments.com": "apartments",
}

# Run order matters: extractors share one page and mutate its state.
_EXTRACTORS: dict[str, type[SectionExtractor]] = {
    "availability": AvailabilityExtractor,
    "contact_info": ContactInfoExtractor,
    "amenities": AmenitiesExtractor,
    "fees_and_policies": FeesPoliciesExtractor,
}


def detect_site(url: str) -> Optional[str]:
    """
    Detect the listing site from a URL.

    Returns the site id or None if the URL is malformed or on an unknown host.
    """
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return None
    return _SITE_HOSTS.get(host)


def get_extractor(section: str, wait_timeout_ms: int = 3000) -> SectionExtractor:
    """
    Create the extractor for a record section.

    Raises ValueError if no extractor is registered for the section.
    """
    try:
        cls = _EXTRACTORS[section]
    except KeyError:
        raise ValueError(
            f"No extractor registered for section '{section}'. "
            f"Available: {', '.join(available_sections())}"
        ) from None
    return cls(wait_timeout_ms=wait_timeout_ms)


def available_sections() -> list[str]:
    """Return all section names in run order."""
    return list(_EXTRACTORS)


def optional_extractors(wait_timeout_ms: int = 3000) -> list[SectionExtractor]:
    """The best-effort extractors, in run order."""
    return [
        get_extractor(section, wait_timeout_ms)
        for section, cls in _EXTRACTORS.items()
        if not cls.required
    ]
