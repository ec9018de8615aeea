"""
Application package initializer.

The application is split into ``core`` (settings, logging, dataset
loading), ``schemas`` (record shapes), ``services`` (catalog queries)
and ``api`` (routers).  ``main`` wires them together.
"""

from .main import app  # noqa: F401
