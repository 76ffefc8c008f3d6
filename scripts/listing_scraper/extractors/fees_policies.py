"""
Fees & Policies Extractor

Reads the tabbed fees/policies cards (pets, parking, required fees,
storage, ...) and the bulleted details cards below them.

Tab discovery falls back in three steps:
1. The tab-button group: click each tab and parse the panel it controls.
2. Well-known fixed panel ids, for pages without tab buttons.
3. Any role=tabpanel element inside the pricing view.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..dom import PageHandle
from ..interactions import click_if_present, scroll_page, settle
from ..schema import Card, DetailsCard, FeesPoliciesResult, Row, TabResult
from ..text import clean
from .base import SectionExtractor

logger = logging.getLogger(__name__)

ALL_IN_PRICE_TOGGLE = "#allInPrice, .js-allInPrice"
FEES_CARD = ".feesPoliciesCard"
SETTLE_MS = 400

TAB_NAV_QUERIES = [
    ".feesPoliciesTabContainer .tabs-nav",
    "#tabWrapper.tabs-nav",
]
TAB_BUTTONS = "button[role='tab']"

# Fixed panel id → tab label, in display order.
KNOWN_PANELS: list[tuple[str, str]] = [
    ("fees-policies-pets-tab", "Pets"),
    ("fees-policies-parking-tab", "Parking"),
    ("fees-policies-required-fees-tab", "Required Fees"),
    ("fees-policies-storage-tab", "Storage"),
]

GENERIC_PANELS = "#pricingView [role='tabpanel']"
DEFAULT_TAB_LABEL = "Fees/Policies"

CARD_ROWS = ":scope .component-body .component-list > li"
TOOLTIP = ".mortar-tooltip-text [role='tooltip']"
DETAILS_CARDS = ".detailsContainer .feesPoliciesCard.with-bullets-card"


class FeesPoliciesExtractor(SectionExtractor):
    section = "fees_and_policies"

    async def prepare(self, page: PageHandle) -> None:
        await scroll_page(page)
        if await click_if_present(page, ALL_IN_PRICE_TOGGLE):
            await settle(page, FEES_CARD, timeout_ms=self.wait_timeout_ms, fallback_ms=SETTLE_MS)

    async def parse(self, page: PageHandle) -> FeesPoliciesResult:
        tabs = await self.tabs_from_buttons(page)
        if tabs is None:
            tabs = await self.tabs_from_known_panels(page)
            if not tabs:
                tabs = await self.tabs_from_generic_panels(page)
        return FeesPoliciesResult(tabs=tabs, details=await self.parse_details(page))

    # -- tab discovery --------------------------------------------------------

    async def tabs_from_buttons(self, page: PageHandle) -> Optional[list[TabResult]]:
        """
        Tabs via the tab-button group.

        Returns None when the page has no tab buttons at all, so the caller
        knows to try the fallbacks.
        """
        nav = None
        for query in TAB_NAV_QUERIES:
            nav = await page.locate_first(query)
            if nav is not None:
                break
        buttons = await page.locate(TAB_BUTTONS, nav) if nav is not None else []
        if not buttons:
            return None

        tabs = []
        for button in buttons:
            await page.click(button, trusted=False)
            panel_id = clean(await page.read_attribute(button, "aria-controls"))
            label = (
                clean(await page.read_text(button))
                or clean(await page.read_attribute(button, "id"))
                or panel_id
            )
            panel = await page.by_id(panel_id)
            if panel is None:
                logger.debug("Tab %r has no panel %r", label, panel_id)
                continue
            await page.reveal(panel)
            tabs.append(await self.parse_panel(page, panel, label))
        return tabs

    async def tabs_from_known_panels(self, page: PageHandle) -> list[TabResult]:
        tabs = []
        for panel_id, label in KNOWN_PANELS:
            panel = await page.by_id(panel_id)
            if panel is not None:
                tabs.append(await self.parse_panel(page, panel, label))
        return tabs

    async def tabs_from_generic_panels(self, page: PageHandle) -> list[TabResult]:
        tabs = []
        for panel in await page.locate(GENERIC_PANELS):
            label_id = clean(await page.read_attribute(panel, "aria-labelledby"))
            label_el = await page.by_id(label_id) if label_id else None
            label = (
                clean(await page.read_text(label_el))
                or clean(await page.read_attribute(panel, "id"))
            )
            tabs.append(await self.parse_panel(page, panel, label or DEFAULT_TAB_LABEL))
        return tabs

    # -- cards ----------------------------------------------------------------

    async def parse_panel(self, page: PageHandle, panel, label: str) -> TabResult:
        cards = [await self.parse_card(page, el) for el in await page.locate(FEES_CARD, panel)]
        return TabResult(tab=label, cards=[c for c in cards if c.is_populated])

    async def parse_card(self, page: PageHandle, card_el) -> Card:
        header = (
            await self.text_of(page, ".header-column", card_el)
            or await self.text_of(page, ".component-header .header-column", card_el)
        )

        rows = []
        for li in await page.locate(CARD_ROWS, card_el):
            row = await self._parse_row(page, li)
            if row is not None:
                rows.append(row)

        comments = await self.text_of(page, ".comments", card_el)
        return Card(header=header, rows=rows, comments=comments or None)

    async def _parse_row(self, page: PageHandle, li) -> Optional[Row]:
        """A name/value row, or None for header rows, comment rows and blanks."""
        if await page.locate_first(".header-column", li) is not None:
            return None
        if await page.has_class(li, "no-border") or await page.locate_first(".comments", li) is not None:
            return None

        name = await self.text_of(page, ".component-row .feeName, .component-row .column", li)
        value = await self.text_of(page, ".component-row .column-right", li)
        tooltip = await self.text_of(page, TOOLTIP, li)
        if not name and not value:
            return None
        return Row(name=name, value=value, tooltip=tooltip or None)

    async def parse_details(self, page: PageHandle) -> list[DetailsCard]:
        details = []
        for card_el in await page.locate(DETAILS_CARDS):
            header = await self.text_of(page, ".component-header .header-column", card_el)
            items = [
                text
                for text in await self.texts_of(
                    page, ".component-body .component-list .with-bullets .column", card_el
                )
                if text
            ]
            if header or items:
                details.append(DetailsCard(header=header, items=items))
        return details
