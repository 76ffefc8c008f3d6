#!/usr/bin/env python3
"""
Apartment Listing Scraper

Scrape an apartments.com listing page into a structured record using
Playwright. Results are cached by URL; a cached listing is returned
without opening the browser.

Usage:
    python scripts/scrape_listing.py <url> [--output FILE] [--quiet]
    python scripts/scrape_listing.py <url> --html saved-page.html

Options:
    --html FILE         Extract from a saved HTML snapshot instead of a live browser
    --requested-by ID   Requester id stored with the cache entry
    --cache-dir DIR     Cache directory (default: $LISTING_CACHE_DIR or scrapes/listings)
    --output FILE       Also write the JSON response to FILE
    --quiet             Only set the exit code

Requirements:
    pip install -e .
    playwright install chromium
"""

import argparse
import asyncio
import json
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from listing_scraper import (
    ExtractionFailure, HtmlPage, ListingScraper, ScrapeResponse, ScraperSettings,
    detect_site,
)
from listing_scraper.logging_config import configure_logging

logger = logging.getLogger("listing_scraper.cli")


def snapshot_session(html_path: str):
    """Session factory serving a saved HTML file instead of a live page."""
    html = Path(html_path).read_text(encoding="utf-8")

    @asynccontextmanager
    async def factory(address, settings):
        yield HtmlPage(html, url=address)

    return factory


async def run(url: str, args: argparse.Namespace) -> ScrapeResponse:
    settings = ScraperSettings.from_env()
    if args.cache_dir:
        settings.cache_dir = args.cache_dir

    scraper_kwargs = {"settings": settings}
    if args.html:
        scraper_kwargs["session_factory"] = snapshot_session(args.html)
    scraper = ListingScraper(**scraper_kwargs)

    try:
        record = await scraper.scrape(url, requested_by=args.requested_by)
    except ExtractionFailure as e:
        logger.error("Error scraping apartment data: %s", e)
        return ScrapeResponse(success=False, error=f"Failed to scrape apartment data: {e}")

    logger.info("Successfully scraped data for property: %s", record.property_name)
    return ScrapeResponse(success=True, data=record)


def main():
    parser = argparse.ArgumentParser(description="Scrape an apartments.com listing page")
    parser.add_argument("url", help="apartments.com listing URL")
    parser.add_argument("--html", help="Extract from a saved HTML snapshot")
    parser.add_argument("--requested-by", default="", help="Requester id stored with the cache entry")
    parser.add_argument("--cache-dir", help="Cache directory")
    parser.add_argument("--output", "-o", help="Also write the JSON response to this file")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet mode (exit code only)")
    args = parser.parse_args()

    configure_logging("WARNING" if args.quiet else ScraperSettings.from_env().log_level)

    if detect_site(args.url) is None:
        if not args.quiet:
            print("❌ Invalid URL. Please provide a valid apartments.com URL")
        sys.exit(2)

    response = asyncio.run(run(args.url, args))
    payload = json.dumps(response.to_dict(), ensure_ascii=False, indent=2)

    if not args.quiet:
        print(payload)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        if not args.quiet:
            print(f"Saved to: {args.output}")

    sys.exit(0 if response.success else 1)


if __name__ == "__main__":
    main()
