"""
Listing Cache

Cache store for extracted listing records, keyed by the exact source
address. Entries never expire: a hit is returned as stored.

FileListingCache keeps one JSON file per address; MemoryListingCache
keeps records in a dict for in-process use and tests.
"""

from __future__ import annotations

import copy
import hashlib
import json
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from .errors import CacheFailure
from .schema import ListingRecord


class ListingCache(ABC):
    """Read/write contract the orchestrator needs from a cache store."""

    @abstractmethod
    def get(self, address: str) -> Optional[ListingRecord]:
        """
        Return the stored record for ``address``, or None if there is none.

        Raises CacheFailure for any error other than "not found".
        """
        ...

    @abstractmethod
    def put(self, address: str, record: ListingRecord, requested_by: str = "") -> None:
        """
        Store ``record`` under ``address``. A second put for the same
        address replaces the first (last write wins).

        Raises CacheFailure if the record could not be stored.
        """
        ...


class FileListingCache(ListingCache):
    """File-based cache, one JSON entry per address."""

    def __init__(self, cache_dir: str = "scrapes/listings"):
        self.cache_dir = Path(cache_dir)

    def _cache_key(self, address: str) -> str:
        return hashlib.sha256(address.encode("utf-8")).hexdigest()[:16]

    def _cache_path(self, address: str) -> Path:
        return self.cache_dir / f"{self._cache_key(address)}.json"

    def get(self, address: str) -> Optional[ListingRecord]:
        cache_path = self._cache_path(address)
        if not cache_path.exists():
            return None

        try:
            with open(cache_path, encoding="utf-8") as f:
                entry = json.load(f)
        except (OSError, ValueError) as e:
            raise CacheFailure(f"Cache read error for {address}: {e}") from e

        if not isinstance(entry, dict):
            raise CacheFailure(f"Malformed cache entry for {address}: not an object")

        # Two addresses sharing a truncated hash must not alias.
        if entry.get("address") != address:
            return None

        try:
            return ListingRecord.from_dict(entry["data"])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CacheFailure(f"Malformed cache entry for {address}: {e}") from e

    def put(self, address: str, record: ListingRecord, requested_by: str = "") -> None:
        entry = {
            "address": address,
            "requested_by": requested_by,
            "cached_at": datetime.now().isoformat(),
            "data": record.to_dict(),
        }
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            with open(self._cache_path(address), "w", encoding="utf-8") as f:
                json.dump(entry, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise CacheFailure(f"Cache write error for {address}: {e}") from e


class MemoryListingCache(ListingCache):
    """In-process cache; records are copied on put and on get."""

    def __init__(self):
        self.records: dict[str, ListingRecord] = {}
        self.requested_by: dict[str, str] = {}

    def get(self, address: str) -> Optional[ListingRecord]:
        record = self.records.get(address)
        return copy.deepcopy(record) if record is not None else None

    def put(self, address: str, record: ListingRecord, requested_by: str = "") -> None:
        self.records[address] = copy.deepcopy(record)
        self.requested_by[address] = requested_by
