"""
Python ↔ JSON Record Converter

Listing records are dataclasses with snake_case attributes; their cached
and printed form uses camelCase keys. Optional fields that are None are
omitted from the output unless the field is marked nullable.
"""

from __future__ import annotations

import re
from dataclasses import fields, is_dataclass
from typing import Any

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel_case(snake_str: str) -> str:
    """Convert snake_case to camelCase."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def to_snake_case(camel_str: str) -> str:
    """Convert camelCase to snake_case."""
    return _CAMEL_BOUNDARY_RE.sub("_", camel_str).lower()


def to_camel_dict(value: Any) -> Any:
    """
    Recursively serialize a dataclass tree to camelCase JSON-ready data.

    Plain dicts inside the tree (e.g. bed info entries) are copied with
    their keys untouched since those keys are page labels, not field names.
    """
    if is_dataclass(value) and not isinstance(value, type):
        out = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if item is None and not f.metadata.get("nullable"):
                continue
            out[to_camel_case(f.name)] = to_camel_dict(item)
        return out
    if isinstance(value, (list, tuple)):
        return [to_camel_dict(v) for v in value]
    if isinstance(value, dict):
        return {k: to_camel_dict(v) for k, v in value.items()}
    return value


def snake_kwargs(cls, data: dict) -> dict:
    """Map camelCase keys of ``data`` onto the dataclass fields of ``cls``."""
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in (data or {}).items():
        name = to_snake_case(key)
        if name in known:
            kwargs[name] = value
    return kwargs
