import pytest

from product_catalog_api.app.core.dataset import ProductCatalog
from product_catalog_api.app.services.product_service import (
    ProductNotFoundError,
    ProductService,
    parse_limit,
    parse_product_id,
)


@pytest.mark.parametrize(
    "raw,expected",
    [("1", 1), ("42", 42), ("-3", -3), ("007", 7), ("abc", None), ("12abc", None),
     ("1.5", None), (" 1", None), ("", None), ("+1", None), ("1_0", None)],
)
def test_parse_product_id(raw, expected):
    assert parse_product_id(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [(None, None), ("", None), ("0", 0), ("5", 5), ("-1", None), ("two", None)],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected


@pytest.fixture
def service(product_records):
    return ProductService(ProductCatalog(product_records, "products"))


def test_get_by_id_first_match():
    records = [
        {"id": 1, "firstName": "first", "gmail": "a@x.com"},
        {"id": 1, "firstName": "second", "gmail": "b@x.com"},
    ]
    service = ProductService(ProductCatalog(records, "contacts"))
    assert service.get_by_id("1")["firstName"] == "first"


def test_get_by_id_not_found_is_value_error(service):
    with pytest.raises(ValueError):
        service.get_by_id("99")
    with pytest.raises(ProductNotFoundError):
        service.get_by_id("x")


def test_get_by_email(service, product_records):
    assert service.get_by_email("a@x.com") == product_records[0]
    with pytest.raises(ProductNotFoundError):
        service.get_by_email("A@x.com")


def test_search_and_limit(service):
    assert [p["id"] for p in service.search("SHOE")] == [1, 4]
    assert [p["id"] for p in service.search("shoe", 1)] == [1]
    assert service.search("shoe", 0) == []
    assert [p["id"] for p in service.search(None, 2)] == [1, 2]
    assert service.search("nothing") == []


def test_phone_entries(service):
    assert service.list_phone_entries()[0] == {"id": 1, "title": "Red Shoe", "gmail": "a@x.com"}


def test_search_lowercases_instead_of_casefolding():
    records = [
        {"id": 1, "title": "Straße", "meta": {"reviewerEmail": "a@x.com"}},
        {"id": 2, "title": "GLASS", "meta": {"reviewerEmail": "b@x.com"}},
    ]
    service = ProductService(ProductCatalog(records, "products"))
    assert [p["id"] for p in service.search("SS")] == [2]
    assert [p["id"] for p in service.search("STRASSE")] == []
    assert [p["id"] for p in service.search("straße")] == [1]
