"""
Persistence adapters.

`json_storage` owns the file on disk; `series_cache` keeps the in-memory copy
that services read from and stage writes into.
"""
