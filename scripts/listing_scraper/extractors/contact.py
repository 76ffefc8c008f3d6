"""
Contact Info Extractor

Expands the office-hours list, then reads the leasing office phone,
website, language, today's hours, weekly office hours and logo.
"""

from __future__ import annotations

import re
from typing import Optional

from ..dom import PageHandle
from ..interactions import click_if_present, settle
from ..schema import ContactInfo, LogoInfo, OfficeHour, PhoneInfo, WebsiteInfo
from ..text import clean
from .base import SectionExtractor

CONTACT_ROOT = ".contactInfo"
VIEW_ALL_HOURS = ".contactInfo .js-viewAllHours"
OFFICE_HOURS_ROWS = ".officeHoursContainer .daysHoursContainer"
SETTLE_MS = 250

_LANGUAGE_PREFIX_RE = re.compile(r"^Language:\s*", re.IGNORECASE)


class ContactInfoExtractor(SectionExtractor):
    section = "contact_info"

    async def prepare(self, page: PageHandle) -> None:
        if await click_if_present(page, VIEW_ALL_HOURS):
            await settle(
                page,
                f"{CONTACT_ROOT} {OFFICE_HOURS_ROWS}",
                timeout_ms=self.wait_timeout_ms,
                fallback_ms=SETTLE_MS,
            )

    async def parse(self, page: PageHandle) -> ContactInfo:
        root = await page.locate_first(CONTACT_ROOT)
        if root is None:
            return ContactInfo(office_hours=[])

        office_hours = []
        for row in await page.locate(OFFICE_HOURS_ROWS, root):
            office_hours.append(OfficeHour(
                days=await self.text_of(page, ".days", row),
                hours=await self.text_of(page, ".hours", row),
            ))

        language = _LANGUAGE_PREFIX_RE.sub("", await self.text_of(page, ".languages span", root))

        return ContactInfo(
            phone=await self._phone(page, root),
            website=await self._website(page, root),
            language=clean(language) or None,
            todays_hours=await self.text_of(page, ".todaysHours span", root) or None,
            office_hours=office_hours,
            logo=await self._logo(page, root),
        )

    async def _phone(self, page: PageHandle, root) -> Optional[PhoneInfo]:
        button = await page.locate_first(".propertyPhone.js-propertyPhoneNumber", root)
        if button is None:
            return None
        digits = clean(await page.read_attribute(button, "phone-data"))
        formatted = await self.text_of(page, "span", button)
        if not digits and not formatted:
            return None
        return PhoneInfo(formatted=formatted or None, digits=digits or None)

    async def _website(self, page: PageHandle, root) -> Optional[WebsiteInfo]:
        link = await page.locate_first(".propertyWebsiteLink.js-externalUrl", root)
        if link is None:
            return None
        return WebsiteInfo(
            url=clean(await page.read_property(link, "href")),
            label=clean(await page.read_text(link)),
        )

    async def _logo(self, page: PageHandle, root) -> Optional[LogoInfo]:
        img = await page.locate_first("img.logo", root)
        if img is None:
            return None
        width = await page.read_property(img, "width")
        height = await page.read_property(img, "height")
        return LogoInfo(
            url=clean(await page.read_property(img, "src")),
            alt=clean(await page.read_attribute(img, "alt")),
            width=int(width) if width else None,
            height=int(height) if height else None,
        )
