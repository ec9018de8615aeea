"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with the bundled sample catalog and listens on port
3030 when nothing is configured.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3030"))

    # Record shape held by the catalog: ``contacts`` (flat ``firstName``
    # and ``gmail``) or ``products`` (``title`` and nested
    # ``meta.reviewerEmail``).
    catalog_schema: str = os.getenv("CATALOG_SCHEMA", "contacts")

    # Path to the JSON dataset.  Empty selects the sample file bundled
    # for ``catalog_schema``.  Relative paths are resolved against the
    # current working directory.
    catalog_path: str = os.getenv("CATALOG_PATH", "")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
