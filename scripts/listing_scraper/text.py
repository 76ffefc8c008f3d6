"""
Text Normalizer

Single normalization point for every string placed in a listing record.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

_WHITESPACE_RE = re.compile(r"\s+")


def clean(value: Optional[str]) -> str:
    """Collapse whitespace runs to one space and trim. None becomes ""."""
    if value is None:
        return ""
    return _WHITESPACE_RE.sub(" ", str(value)).strip()


def uniq(values: Iterable[str]) -> list[str]:
    """Drop empty strings and duplicates, keeping first-seen order."""
    return list(dict.fromkeys(v for v in values if v))
