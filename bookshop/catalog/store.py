"""
Catalogue sources for the shop.

A source loads the full list of listed books once per view activation.
``HttpCatalogSource`` asks the shop backend; ``FileCatalogSource`` reads a
local JSON dataset (the bundled ``sample_books.json`` is used for local
development and tests). Both turn raw records into ``Item`` instances at
this boundary, so the rest of the service only ever sees one owner field.

Loads never raise: the outcome is a ``FetchResult`` which either carries
the items or the reason the load failed. Callers decide how to present a
failure; there is no retry.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol

from pydantic import BaseModel, Field

from ..config import Settings
from ..models import Item, item_from_record
from .backend_service import extract_records, fetch_book_records
from .errors import FetchError


logger = logging.getLogger(__name__)


class FetchResult(BaseModel):
    """Outcome of one catalogue load."""

    ok: bool
    items: List[Item] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, items: Iterable[Item]) -> "FetchResult":
        return cls(ok=True, items=list(items))

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(ok=False, items=[], error=reason)


class CatalogSource(Protocol):
    def fetch_catalog(self) -> FetchResult:
        ...


def items_from_records(records: Iterable[Dict[str, Any]]) -> List[Item]:
    """Convert raw records to items, skipping the ones that do not validate.

    Parameters
    ----------
    records : Iterable[Dict[str, Any]]
        Book records as sent by the backend (``id``, ``title``,
        ``author``, ``price``, ``bookImage`` and the owner either as
        ``user.id`` or ``userId``).

    Returns
    -------
    List[Item]
        The valid items, in their original order.
    """
    items: List[Item] = []
    for record in records:
        try:
            items.append(item_from_record(record))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping book record %r: %s", record.get("id"), exc)
    return items


class HttpCatalogSource:
    """Loads the catalogue from the shop backend."""

    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    def fetch_catalog(self) -> FetchResult:
        try:
            records = fetch_book_records(self.url, timeout=self.timeout)
        except FetchError as exc:
            logger.warning("Catalogue load from %s failed: %s", self.url, exc.reason)
            return FetchResult.failure(exc.reason)
        return FetchResult.success(items_from_records(records))


class FileCatalogSource:
    """Loads the catalogue from a local JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load_records(self) -> List[Dict[str, Any]]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as exc:
            raise FetchError(f"could not read {self.path}: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"{self.path} is not valid JSON") from exc
        return extract_records(raw)

    def fetch_catalog(self) -> FetchResult:
        try:
            records = self._load_records()
        except FetchError as exc:
            logger.warning("Catalogue load from %s failed: %s", self.path, exc.reason)
            return FetchResult.failure(exc.reason)
        return FetchResult.success(items_from_records(records))


def source_from_settings(settings: Settings) -> CatalogSource:
    """Pick the backend when a URL is configured, the local file otherwise."""
    if settings.catalog_url:
        return HttpCatalogSource(settings.catalog_url, timeout=settings.request_timeout)
    return FileCatalogSource(settings.catalog_file)
