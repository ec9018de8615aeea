"""
Pydantic models for catalog records.

The catalog holds one of two record shapes.  ``contacts`` records are
flat and carry ``firstName`` and ``gmail``; ``products`` records carry
a ``title`` and keep the contact e‑mail nested under
``meta.reviewerEmail``.  Both shapes allow arbitrary additional fields,
which are preserved and returned verbatim by the API.

``CatalogSchema`` describes where the lookup keys live in a record of
each shape so that the loader can resolve them once at startup.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Type

from pydantic import BaseModel, Field, StrictInt, StrictStr


class ContactRecord(BaseModel):
    """Flat record with a first name and a Gmail address."""

    id: StrictInt = Field(..., examples=[1])
    firstName: StrictStr = Field(..., examples=["John"])
    gmail: StrictStr = Field(..., examples=["john@gmail.com"])

    model_config = {"extra": "allow"}


class ReviewMeta(BaseModel):
    reviewerEmail: StrictStr = Field(..., examples=["emily.johnson@x.dummyjson.com"])

    model_config = {"extra": "allow"}


class ProductRecord(BaseModel):
    """Product record whose e‑mail lives in ``meta.reviewerEmail``."""

    id: StrictInt = Field(..., examples=[1])
    title: StrictStr = Field(..., examples=["Essence Mascara Lash Princess"])
    meta: ReviewMeta

    model_config = {"extra": "allow"}


@dataclass(frozen=True)
class CatalogSchema:
    """Location of the lookup fields for one record shape.

    ``name_field`` is returned in the phone list and, for searchable
    schemas, matched by ``/api/find/query``.  ``email_path`` is the key
    path of the e‑mail used by ``/api/gmail/{gmail}``.
    """

    name: str
    record_model: Type[BaseModel]
    name_field: str
    email_path: Tuple[str, ...]
    searchable: bool = False


CONTACTS = CatalogSchema(
    name="contacts",
    record_model=ContactRecord,
    name_field="firstName",
    email_path=("gmail",),
)

PRODUCTS = CatalogSchema(
    name="products",
    record_model=ProductRecord,
    name_field="title",
    email_path=("meta", "reviewerEmail"),
    searchable=True,
)

SCHEMAS: Dict[str, CatalogSchema] = {schema.name: schema for schema in (CONTACTS, PRODUCTS)}
