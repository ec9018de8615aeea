"""
Service layer for catalog lookups.

``ProductService`` answers every read the API exposes with a linear
scan over an injected ``ProductCatalog``.  Scans follow catalog order
and stop at the first match, so duplicate ids or e‑mails resolve to
the earliest record.  Failed lookups raise ``ProductNotFoundError``;
endpoints translate it into an HTTP 404.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from product_catalog_api.app.core.dataset import ProductCatalog

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"-?[0-9]+")
_LIMIT_RE = re.compile(r"[0-9]+")


class ProductNotFoundError(ValueError):
    """Raised when an id or e‑mail lookup matches no record."""


def parse_product_id(raw: str) -> Optional[int]:
    """Strictly parse a path id.

    Only an optional minus sign followed by ASCII digits is accepted.
    Anything else returns ``None``, which matches no record.
    """
    if _ID_RE.fullmatch(raw):
        return int(raw)
    return None


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Parse the ``limit`` query parameter.

    Returns a non‑negative integer, or ``None`` (no truncation) when the
    value is absent, empty, negative or not an integer.
    """
    if raw is not None and _LIMIT_RE.fullmatch(raw):
        return int(raw)
    return None


class ProductService:
    """Read‑only queries over a ``ProductCatalog``."""

    def __init__(self, catalog: ProductCatalog) -> None:
        self.catalog = catalog

    def list_phone_entries(self) -> List[Dict[str, Any]]:
        """Project every record to ``id``, its name field and ``gmail``."""
        name_field = self.catalog.schema.name_field
        return [
            {"id": entry.id, name_field: entry.name, "gmail": entry.email}
            for entry in self.catalog.entries
        ]

    def get_by_email(self, email: str) -> Dict[str, Any]:
        """Return the first record whose e‑mail equals ``email`` exactly."""
        for entry in self.catalog.entries:
            if entry.email == email:
                return entry.record
        logger.debug("No record with e-mail %r", email)
        raise ProductNotFoundError(f"Product with e-mail {email} not found")

    def get_by_id(self, raw_id: str) -> Dict[str, Any]:
        """Return the first record whose ``id`` equals the parsed ``raw_id``."""
        product_id = parse_product_id(raw_id)
        if product_id is not None:
            for entry in self.catalog.entries:
                if entry.id == product_id:
                    return entry.record
        logger.debug("No record with id %r", raw_id)
        raise ProductNotFoundError(f"Product {raw_id} not found")

    def search(self, search: Optional[str] = None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Filter records by a case‑insensitive substring of the name field.

        An empty or missing ``search`` keeps every record.  ``limit``
        truncates the filtered result, preserving order.
        """
        entries = self.catalog.entries
        if search:
            needle = search.lower()
            entries = tuple(entry for entry in entries if needle in entry.name.lower())
        if limit is not None:
            entries = entries[:limit]
        return [entry.record for entry in entries]
