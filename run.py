"""Entry point for the Product Catalog API.

Serves the application with uvicorn.  Host and port are read from the
``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0`` and
``3030``); the dataset is selected with ``CATALOG_SCHEMA`` and
``CATALOG_PATH``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.core.logging_config import resolve_log_level
from product_catalog_api.app.main import app


async def main() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=resolve_log_level(settings.log_level).lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
