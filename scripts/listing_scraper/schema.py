"""
Listing Record Schema

Typed records produced by the section extractors and assembled into a
ListingRecord. Serialized form (cache files, CLI output) uses camelCase
keys; see converter.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .converter import snake_kwargs, to_camel_dict


# ---------------------------------------------------------------------------
# Availability / pricing
# ---------------------------------------------------------------------------

@dataclass
class UnitRow:
    """One unit in a model card's unit grid. Missing values are ""."""

    unit: str = ""
    price: str = ""
    sqft: str = ""
    availability: str = ""


@dataclass
class ModelCard:
    """A floor-plan model with its headline rent and unit rows."""

    model_name: str = ""
    headline_rent: str = ""
    details: list[str] = field(default_factory=list)
    availability_summary: str = ""
    image: Optional[str] = None
    units: list[UnitRow] = field(default_factory=list)
    property_address: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> ModelCard:
        kwargs = snake_kwargs(cls, data)
        kwargs["units"] = [UnitRow(**snake_kwargs(UnitRow, u)) for u in data.get("units", [])]
        kwargs["details"] = list(data.get("details", []))
        return cls(**kwargs)


# ---------------------------------------------------------------------------
# Contact info
# ---------------------------------------------------------------------------

@dataclass
class PhoneInfo:
    formatted: Optional[str] = None
    digits: Optional[str] = None


@dataclass
class WebsiteInfo:
    url: Optional[str] = None
    label: Optional[str] = None


@dataclass
class LogoInfo:
    url: str = ""
    alt: str = ""
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class OfficeHour:
    days: str = ""
    hours: str = ""


@dataclass
class ContactInfo:
    """Leasing office contact details. office_hours is never None."""

    phone: Optional[PhoneInfo] = None
    website: Optional[WebsiteInfo] = None
    language: Optional[str] = None
    todays_hours: Optional[str] = None
    office_hours: list[OfficeHour] = field(default_factory=list)
    logo: Optional[LogoInfo] = None

    @classmethod
    def from_dict(cls, data: dict) -> ContactInfo:
        phone = data.get("phone")
        website = data.get("website")
        logo = data.get("logo")
        return cls(
            phone=PhoneInfo(**snake_kwargs(PhoneInfo, phone)) if phone is not None else None,
            website=WebsiteInfo(**snake_kwargs(WebsiteInfo, website)) if website is not None else None,
            language=data.get("language"),
            todays_hours=data.get("todaysHours"),
            office_hours=[
                OfficeHour(**snake_kwargs(OfficeHour, h)) for h in data.get("officeHours", [])
            ],
            logo=LogoInfo(**snake_kwargs(LogoInfo, logo)) if logo is not None else None,
        )


# ---------------------------------------------------------------------------
# Amenities
# ---------------------------------------------------------------------------

@dataclass
class AmenityGroup:
    header: str = ""
    items: list[str] = field(default_factory=list)


@dataclass
class AmenitySection:
    """One titled amenities block ("Community Amenities", "Apartment Features")."""

    title: str = ""
    icons: list[str] = field(default_factory=list)
    groups: list[AmenityGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> AmenitySection:
        return cls(
            title=data.get("title", ""),
            icons=list(data.get("icons", [])),
            groups=[
                AmenityGroup(header=g.get("header", ""), items=list(g.get("items", [])))
                for g in data.get("groups", [])
            ],
        )


@dataclass
class AmenitiesResult:
    community: Optional[AmenitySection] = None
    apartment: Optional[AmenitySection] = None

    @classmethod
    def from_dict(cls, data: dict) -> AmenitiesResult:
        community = data.get("community")
        apartment = data.get("apartment")
        return cls(
            community=AmenitySection.from_dict(community) if community else None,
            apartment=AmenitySection.from_dict(apartment) if apartment else None,
        )


# ---------------------------------------------------------------------------
# Fees & policies
# ---------------------------------------------------------------------------

@dataclass
class Row:
    name: str = ""
    value: str = ""
    tooltip: Optional[str] = None


@dataclass
class Card:
    """A fees/policies card inside a tab panel."""

    header: str = ""
    rows: list[Row] = field(default_factory=list)
    comments: Optional[str] = field(default=None, metadata={"nullable": True})

    @property
    def is_populated(self) -> bool:
        """True if the card has a header, at least one row, or comments."""
        return bool(self.header or self.rows or self.comments)


@dataclass
class TabResult:
    tab: str = ""
    cards: list[Card] = field(default_factory=list)


@dataclass
class DetailsCard:
    header: str = ""
    items: list[str] = field(default_factory=list)


@dataclass
class FeesPoliciesResult:
    tabs: list[TabResult] = field(default_factory=list)
    details: list[DetailsCard] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> FeesPoliciesResult:
        tabs = []
        for tab in data.get("tabs", []):
            cards = []
            for c in tab.get("cards", []):
                rows = [Row(**snake_kwargs(Row, r)) for r in c.get("rows", [])]
                cards.append(Card(header=c.get("header", ""), rows=rows, comments=c.get("comments")))
            tabs.append(TabResult(tab=tab.get("tab", ""), cards=cards))
        details = [
            DetailsCard(header=d.get("header", ""), items=list(d.get("items", [])))
            for d in data.get("details", [])
        ]
        return cls(tabs=tabs, details=details)


# ---------------------------------------------------------------------------
# Composite record
# ---------------------------------------------------------------------------

@dataclass
class AvailabilityData:
    """Output of the Availability extractor: the record's mandatory fields."""

    property_name: str = ""
    property_address: str = ""
    bed_info: list[dict[str, str]] = field(default_factory=list)
    availability: list[ModelCard] = field(default_factory=list)


@dataclass(frozen=True)
class ListingRecord:
    """
    Composite listing data for one source address.

    Frozen once assembled: the orchestrator writes it to the cache once and
    every later lookup returns it unmodified.
    """

    property_name: str = ""
    property_address: str = ""
    bed_info: list[dict[str, str]] = field(default_factory=list)
    availability: list[ModelCard] = field(default_factory=list)
    contact_info: Optional[ContactInfo] = None
    amenities: Optional[AmenitiesResult] = None
    fees_and_policies: Optional[FeesPoliciesResult] = None

    @classmethod
    def assemble(
        cls,
        availability: AvailabilityData,
        contact_info: Optional[ContactInfo] = None,
        amenities: Optional[AmenitiesResult] = None,
        fees_and_policies: Optional[FeesPoliciesResult] = None,
    ) -> ListingRecord:
        return cls(
            property_name=availability.property_name,
            property_address=availability.property_address,
            bed_info=availability.bed_info,
            availability=availability.availability,
            contact_info=contact_info,
            amenities=amenities,
            fees_and_policies=fees_and_policies,
        )

    def to_dict(self) -> dict:
        """Serialize to the camelCase JSON form."""
        return to_camel_dict(self)

    @classmethod
    def from_dict(cls, data: dict) -> ListingRecord:
        contact = data.get("contactInfo")
        amenities = data.get("amenities")
        fees = data.get("feesAndPolicies")
        return cls(
            property_name=data.get("propertyName", ""),
            property_address=data.get("propertyAddress", ""),
            bed_info=[dict(entry) for entry in data.get("bedInfo", [])],
            availability=[ModelCard.from_dict(m) for m in data.get("availability", [])],
            contact_info=ContactInfo.from_dict(contact) if contact is not None else None,
            amenities=AmenitiesResult.from_dict(amenities) if amenities is not None else None,
            fees_and_policies=FeesPoliciesResult.from_dict(fees) if fees is not None else None,
        )


@dataclass
class ScrapeResponse:
    """Outcome envelope printed by the command-line caller."""

    success: bool = True
    data: Optional[ListingRecord] = None
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return to_camel_dict(self)
