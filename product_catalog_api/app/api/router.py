"""
Top‑level routers for the API.

``router`` bundles the routes every catalog serves.  ``search_router``
is kept separate because ``create_app`` only includes it when the
catalog schema supports title search.
"""

from fastapi import APIRouter

from .endpoints import pages, products, search

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(products.router, prefix="/api", tags=["products"])

search_router = APIRouter()

search_router.include_router(search.router, prefix="/api", tags=["search"])
