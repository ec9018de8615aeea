"""
Search endpoint.

Only mounted for catalogs whose schema has a searchable ``title``
(see ``CatalogSchema.searchable``).
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from product_catalog_api.app.api.deps import get_product_service
from product_catalog_api.app.services.product_service import ProductService, parse_limit

router = APIRouter()


@router.get("/find/query")
async def find_products(
    search: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
) -> List[Dict[str, Any]]:
    """Filter products by title, then keep at most ``limit`` of them.

    - **search**: case‑insensitive substring of the title; empty or
      missing applies no filter.
    - **limit**: non‑negative integer; anything else is ignored.
    """
    return service.search(search, parse_limit(limit))
