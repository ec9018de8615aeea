from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.dataset import ProductCatalog
from product_catalog_api.app.main import create_app

CONTACTS = [
    {"id": 1, "firstName": "Red Shoe", "gmail": "a@x.com", "phone": "555-0101"},
    {"id": 2, "firstName": "Blue Hat", "gmail": "b@x.com", "phone": "555-0102"},
    {"id": 3, "firstName": "Green Scarf", "gmail": "c@x.com", "tags": ["winter"]},
]

PRODUCTS = [
    {"id": 1, "title": "Red Shoe", "price": 49.5, "meta": {"reviewerEmail": "a@x.com"}},
    {"id": 2, "title": "Blue Hat", "price": 15, "meta": {"reviewerEmail": "b@x.com"}},
    {"id": 3, "title": "red scarf", "price": 20, "meta": {"reviewerEmail": "c@x.com", "barcode": "123"}},
    {"id": 4, "title": "Shoe Horn", "price": 3, "meta": {"reviewerEmail": "a@x.com"}},
]


@pytest.fixture
def contact_records():
    return copy.deepcopy(CONTACTS)


@pytest.fixture
def product_records():
    return copy.deepcopy(PRODUCTS)


@pytest.fixture
def contacts_client(contact_records):
    app = create_app(catalog=ProductCatalog(contact_records, "contacts"))
    return TestClient(app)


@pytest.fixture
def products_client(product_records):
    app = create_app(catalog=ProductCatalog(product_records, "products"))
    return TestClient(app)
