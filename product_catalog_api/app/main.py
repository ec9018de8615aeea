"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging, loads
the product dataset and includes the routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn or another ASGI
server, e.g.::

    uvicorn product_catalog_api.app.main:app --port 3030

or through ``run.py`` at the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router, search_router
from .core.config import Settings, settings
from .core.dataset import ProductCatalog, load_catalog
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def plain_text_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render HTTP errors as ``text/plain`` with the detail as the body."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(
    catalog: Optional[ProductCatalog] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    catalog : Optional[ProductCatalog]
        Dataset to serve.  When omitted it is loaded from
        ``app_settings.catalog_path`` using ``app_settings.catalog_schema``;
        a ``DatasetError`` from the loader aborts startup.
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    if catalog is None:
        catalog = load_catalog(app_settings.catalog_path or None, app_settings.catalog_schema)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Server is running on port %s", app_settings.port)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    app.include_router(api_router)
    if catalog.schema.searchable:
        app.include_router(search_router)

    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
