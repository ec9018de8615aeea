"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler, and optionally a file
handler, to the root logger.  ``run.py`` starts uvicorn without its
own logging config, so the ``uvicorn.*`` loggers propagate here and
server and application messages share one format.  Both use
``resolve_log_level`` so an unknown ``LOG_LEVEL`` means ``INFO``
everywhere.
"""

import logging
from pathlib import Path
from typing import Optional

# Names understood by both ``logging`` and uvicorn's ``--log-level``.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(level: Optional[str]) -> str:
    """Return ``level`` upper‑cased, or ``"INFO"`` if it is not a known name."""
    name = (level or "").strip().upper()
    return name if name in LOG_LEVELS else "INFO"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; see ``resolve_log_level``.
    logfile : Optional[str]
        Path of a file to also write log records to.  Relative paths
        are resolved against the current working directory.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by pytest or a repeated create_app call.
        return

    logger.setLevel(getattr(logging, resolve_log_level(level)))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
