"""
Top‑level package for the Product Catalog API.

All functionality lives in submodules under ``app``; run the server
with ``python run.py`` or ``uvicorn product_catalog_api.app.main:app``.
"""

__all__ = []
