"""
Loading of the static product dataset.

The dataset is a JSON array of records read once when the application
is created.  Every record is validated against the active
``CatalogSchema`` before the server accepts requests, so a malformed
file stops the process at startup instead of failing individual
requests later.  The resulting ``ProductCatalog`` is never modified
after construction.
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from pydantic import ValidationError

from product_catalog_api.app.schemas.product import SCHEMAS, CatalogSchema

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


class DatasetError(Exception):
    """Raised when the dataset cannot be read or fails validation."""


@dataclass(frozen=True)
class CatalogEntry:
    """A stored record together with its pre‑resolved lookup keys."""

    id: int
    name: str
    email: str
    record: Dict[str, Any]


def get_schema(schema: Union[str, CatalogSchema]) -> CatalogSchema:
    """Return the ``CatalogSchema`` for ``schema`` (a name or instance)."""
    if isinstance(schema, CatalogSchema):
        return schema
    try:
        return SCHEMAS[schema]
    except KeyError:
        known = ", ".join(sorted(SCHEMAS))
        raise DatasetError(f"Unknown catalog schema '{schema}' (expected one of: {known})") from None


def default_catalog_path(schema: Union[str, CatalogSchema]) -> Path:
    """Path of the sample dataset bundled for ``schema``."""
    return DATA_DIR / f"{get_schema(schema).name}.json"


def _resolve(record: Dict[str, Any], path: Tuple[str, ...]) -> Any:
    value: Any = record
    for key in path:
        value = value[key]
    return value


def _format_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<record>'}: {err['msg']}"
        for err in exc.errors()
    )


class ProductCatalog:
    """Immutable, ordered collection of validated records.

    Records keep their source order, which is the order used by every
    listing and by first‑match lookups.  The catalog stores deep copies
    of the input so later changes to the caller's objects do not leak in.
    """

    def __init__(
        self,
        records: Iterable[Any],
        schema: Union[str, CatalogSchema] = "contacts",
    ) -> None:
        self._schema = get_schema(schema)
        entries = []
        seen_ids = set()
        for index, raw in enumerate(records):
            if not isinstance(raw, dict):
                raise DatasetError(
                    f"Record {index} must be a JSON object, got {type(raw).__name__}"
                )
            try:
                self._schema.record_model.model_validate(raw)
            except ValidationError as exc:
                raise DatasetError(
                    f"Record {index} is not a valid '{self._schema.name}' record: {_format_errors(exc)}"
                ) from exc
            record = copy.deepcopy(raw)
            if record["id"] in seen_ids:
                logger.warning("Duplicate id %s at record %s; lookups return the first one", record["id"], index)
            seen_ids.add(record["id"])
            entries.append(
                CatalogEntry(
                    id=record["id"],
                    name=record[self._schema.name_field],
                    email=_resolve(record, self._schema.email_path),
                    record=record,
                )
            )
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)

    @property
    def schema(self) -> CatalogSchema:
        return self._schema

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return (entry.record for entry in self._entries)


def load_catalog(
    path: Optional[Union[str, Path]] = None,
    schema: Union[str, CatalogSchema] = "contacts",
) -> ProductCatalog:
    """Read a JSON dataset from ``path`` and build a ``ProductCatalog``.

    When ``path`` is omitted the sample file bundled for ``schema`` is
    used.  Raises ``DatasetError`` if the file is missing, is not valid
    JSON, is not a top‑level array or contains an invalid record.
    """
    catalog_schema = get_schema(schema)
    dataset_path = Path(path) if path else default_catalog_path(catalog_schema)
    try:
        with dataset_path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise DatasetError(f"Dataset file not found: {dataset_path}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Dataset file {dataset_path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise DatasetError(f"Dataset file {dataset_path} must contain a JSON array")

    catalog = ProductCatalog(data, catalog_schema)
    logger.info(
        "Loaded %s '%s' records from %s", len(catalog), catalog_schema.name, dataset_path
    )
    return catalog
