"""Series API: CRUD over a JSON-backed, cached collection of series."""
