"""
Availability / Pricing Extractor

Reads the property header, the bed/price range summary, and the pricing
grid of floor-plan model cards with their unit rows. This is the only
mandatory section: it supplies the record's required fields.
"""

from __future__ import annotations

import re
from typing import Optional

from ..dom import PageHandle
from ..schema import AvailabilityData, ModelCard, UnitRow
from ..text import clean
from .base import SectionExtractor

BACKGROUND_URL_RE = re.compile(r"""url\(["']?(.*?)["']?\)""", re.IGNORECASE)

PROPERTY_NAME = "#propertyName"
PROPERTY_ADDRESS = "#propertyAddressRow"
BED_RANGE_ITEMS = ".priceBedRangeInfo li"
MODEL_CARDS = ".pricingGridItem"
UNIT_ROWS = ".unitGridContainer ul > li.unitContainer"


def parse_background_url(style_value: str) -> Optional[str]:
    """Pull the URL out of a CSS ``url(...)`` value, None if there is none."""
    m = BACKGROUND_URL_RE.search(style_value or "")
    return m.group(1) if m and m.group(1) else None


class AvailabilityExtractor(SectionExtractor):
    section = "availability"
    required = True

    async def parse(self, page: PageHandle) -> AvailabilityData:
        property_name = await self.text_of(page, PROPERTY_NAME)
        property_address = await self.text_of(page, PROPERTY_ADDRESS)
        bed_info = await self._parse_bed_info(page)

        cards = []
        for card_el in await page.locate(MODEL_CARDS):
            cards.append(await self._parse_model_card(page, card_el, property_address))

        return AvailabilityData(
            property_name=property_name,
            property_address=property_address,
            bed_info=bed_info,
            availability=cards,
        )

    async def _parse_bed_info(self, page: PageHandle) -> list[dict[str, str]]:
        items = []
        for li in await page.locate(BED_RANGE_ITEMS):
            label = await self.text_of(page, ".rentInfoLabel", li)
            detail = await self.text_of(page, ".rentInfoDetail", li)
            if label:
                items.append({label: detail})
        return items

    async def _parse_model_card(self, page: PageHandle, card, property_address: str) -> ModelCard:
        details = [d for d in await self.texts_of(page, ".detailsTextWrapper span", card) if d]
        units = [
            await self._parse_unit_row(page, li)
            for li in await page.locate(UNIT_ROWS, card)
        ]
        return ModelCard(
            model_name=await self.text_of(page, ".modelName", card),
            headline_rent=await self.text_of(page, ".rentLabel", card),
            details=details,
            availability_summary=await self.text_of(page, ".availability", card),
            image=await self._floor_plan_image(page, card),
            units=units,
            property_address=property_address,
        )

    async def _floor_plan_image(self, page: PageHandle, card) -> Optional[str]:
        """Inline background-image URL first, then the data-background-image fallback."""
        image_el = await page.locate_first(".floorPlanButtonImage", card)
        if image_el is None:
            return None
        from_style = parse_background_url(await page.read_style(image_el, "backgroundImage"))
        if from_style:
            return clean(from_style)
        from_data = clean(await page.read_attribute(image_el, "data-background-image"))
        return from_data or None

    async def _parse_unit_row(self, page: PageHandle, li) -> UnitRow:
        unit = clean(await page.read_attribute(li, "data-unit"))
        if not unit:
            unit = await self.text_of(page, ".unitColumn .js-viewUnitDetails-modal", li)
        return UnitRow(
            unit=unit,
            price=await self.text_of(page, ".pricingColumn span:not(.screenReaderOnly)", li),
            sqft=await self.text_of(page, ".sqftColumn span:not(.screenReaderOnly)", li),
            availability=await self.text_of(page, ".availableColumn .dateAvailable", li),
        )
