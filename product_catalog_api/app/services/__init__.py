"""
Service layer abstraction.

Services hold the query logic over the in‑memory catalog so the API
handlers stay thin.
"""
