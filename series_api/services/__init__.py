"""
High-level use cases for the Series API.

Routers (FastAPI endpoints) call these services instead of touching the cache
or the JSON file directly.
"""
