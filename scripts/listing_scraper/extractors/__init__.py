"""
Section Extractor Modules

Each module provides an extractor class that reads one section of a
listing page into its typed record.
"""

from .base import SectionExtractor
from .availability import AvailabilityExtractor
from .contact import ContactInfoExtractor
from .amenities import AmenitiesExtractor
from .fees_policies import FeesPoliciesExtractor

__all__ = [
    "SectionExtractor",
    "AvailabilityExtractor",
    "ContactInfoExtractor",
    "AmenitiesExtractor",
    "FeesPoliciesExtractor",
]
