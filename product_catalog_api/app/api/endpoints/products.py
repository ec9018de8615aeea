"""
Product lookup endpoints.

These routes expose the catalog read‑only: a projected list of every
record and exact lookups by e‑mail or by id.  Lookups that match
nothing respond with HTTP 404 and the plain‑text body
``Product not found``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from product_catalog_api.app.api.deps import get_product_service
from product_catalog_api.app.services.product_service import ProductNotFoundError, ProductService

router = APIRouter()

NOT_FOUND_DETAIL = "Product not found"


@router.get("/phone")
async def list_phone_entries(
    service: ProductService = Depends(get_product_service),
) -> List[Dict[str, Any]]:
    """Return ``id``, the name field and ``gmail`` of every record.

    Entries keep the order of the underlying dataset.
    """
    return service.list_phone_entries()


@router.get("/gmail/{gmail:path}")
async def get_product_by_email(
    gmail: str,
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Retrieve the first record whose e‑mail equals ``gmail`` (case‑sensitive).

    Declared as a path parameter so addresses with ``/`` in the local
    part still reach the lookup.
    """
    try:
        return service.get_by_email(gmail)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL) from e


@router.get("/product/{product_id}")
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Retrieve a single record by its integer id.

    The id is taken as a raw string so that non‑numeric input results
    in a 404 rather than a validation error.
    """
    try:
        return service.get_by_id(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL) from e
