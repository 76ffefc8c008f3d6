"""
Amenities Extractor

Locates the "Community Amenities" and "Apartment Features" sections by
their heading text and reads each one's icon list and labeled spec groups.
"""

from __future__ import annotations

from typing import Optional

from ..dom import PageHandle
from ..interactions import scroll_page, settle
from ..schema import AmenitiesResult, AmenityGroup, AmenitySection
from ..text import clean, uniq
from .base import SectionExtractor

SECTION_TITLES = "h3.sectionTitle"
COMMUNITY_TITLE = "Community Amenities"
APARTMENT_TITLE = "Apartment Features"
SETTLE_MS = 200


class AmenitiesExtractor(SectionExtractor):
    section = "amenities"

    async def prepare(self, page: PageHandle) -> None:
        await scroll_page(page)
        await settle(page, SECTION_TITLES, timeout_ms=self.wait_timeout_ms, fallback_ms=SETTLE_MS)

    async def parse(self, page: PageHandle) -> AmenitiesResult:
        return AmenitiesResult(
            community=await self.parse_section(page, COMMUNITY_TITLE),
            apartment=await self.parse_section(page, APARTMENT_TITLE),
        )

    async def parse_section(self, page: PageHandle, title: str) -> Optional[AmenitySection]:
        """Read one amenities section, None if no heading matches ``title``."""
        heading = await self._find_heading(page, title)
        if heading is None:
            return None
        container = await page.parent(heading)
        if container is None:
            return None

        icons = await self.texts_of(
            page, ".amenitiesIconGridContainer .amenityCard .amenityLabel", container
        )

        groups = []
        for group_el in await page.locate(".spec .specGroup", container):
            header = await self.text_of(page, ".specGroupName", group_el)
            items = uniq(await self.texts_of(page, ".subSpec li.specInfo > span", group_el))
            if header or items:
                groups.append(AmenityGroup(header=header, items=items))

        return AmenitySection(
            title=clean(await page.read_text(heading)) or title,
            icons=uniq(icons),
            groups=groups,
        )

    async def _find_heading(self, page: PageHandle, title: str):
        wanted = title.lower()
        for heading in await page.locate(SECTION_TITLES):
            if clean(await page.read_text(heading)).lower() == wanted:
                return heading
        return None
