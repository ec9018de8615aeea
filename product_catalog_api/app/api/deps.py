"""
FastAPI dependencies shared by the endpoint modules.

The catalog is attached to ``app.state`` by ``create_app`` so that
tests can build an application around a fixture catalog without
touching module globals.
"""

from fastapi import Depends, Request

from product_catalog_api.app.core.dataset import ProductCatalog
from product_catalog_api.app.services.product_service import ProductService


def get_catalog(request: Request) -> ProductCatalog:
    return request.app.state.catalog


def get_product_service(catalog: ProductCatalog = Depends(get_catalog)) -> ProductService:
    return ProductService(catalog)
