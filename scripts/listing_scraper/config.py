"""
Scraper Settings

Runtime configuration read from LISTING_* environment variables, with
defaults suitable for a local run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/69.0.3497.100 Safari/537.36"
)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ScraperSettings:
    """Browser, wait and cache settings for one ListingScraper."""

    cache_dir: str = "scrapes/listings"
    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    viewport: dict = field(default_factory=lambda: {"width": 1920, "height": 1080})
    navigation_timeout_ms: int = 60000
    # Upper bound for post-interaction waits (contact hours, amenities, fees).
    wait_timeout_ms: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ScraperSettings:
        return cls(
            cache_dir=os.getenv("LISTING_CACHE_DIR", "scrapes/listings"),
            headless=_env_bool("LISTING_HEADLESS", True),
            user_agent=os.getenv("LISTING_USER_AGENT", DEFAULT_USER_AGENT),
            navigation_timeout_ms=int(os.getenv("LISTING_NAV_TIMEOUT_MS", "60000")),
            wait_timeout_ms=int(os.getenv("LISTING_WAIT_TIMEOUT_MS", "3000")),
            log_level=os.getenv("LISTING_LOG_LEVEL", "INFO").upper(),
        )
