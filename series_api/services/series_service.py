"""Series use cases (list, lookup, filter, create, update, delete)."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from series_api.domain.series import (
    REQUIRED_FIELDS,
    build_serie,
    has_non_finite,
    is_missing,
    merge_serie,
)
from series_api.repositories.json_storage import JsonStorage, StorageError
from series_api.repositories.series_cache import SeriesCache

logger = logging.getLogger(__name__)


class SeriesError(Exception):
    """Base exception for series workflow."""


class InvalidInputError(SeriesError):
    """Raised when a request value is missing or not representable as JSON."""


class SerieNotFoundError(SeriesError):
    """Raised when no record has the requested id."""


class NoMatchesError(SeriesError):
    """Raised when a gender filter matches nothing."""


class PersistError(SeriesError):
    """Raised when the cache was changed but the file write failed."""


class SeriesService:
    """
    Coordinates the in-memory cache and the JSON store.

    Every mutation changes the cache first, then saves the whole cache. When
    the save fails the cache is left as it is: after a failed create or delete
    reads keep showing the change until a later save succeeds. Update is the
    exception to cache-first, it reloads from disk before merging.

    There is no locking. Concurrent writers race on the file and the last save
    to finish wins.
    """

    def __init__(self, cache: SeriesCache) -> None:
        self.cache = cache

    @property
    def storage(self) -> JsonStorage:
        return self.cache.storage

    async def bootstrap(self) -> None:
        """Create the file if needed and warm the cache, logging any failure."""
        try:
            await self.storage.ensure_exists()
        except StorageError:
            logger.exception("Could not create series database at %s", self.storage.path)
            return
        try:
            await self.cache.refresh()
        except StorageError:
            logger.exception("Could not load series from %s", self.storage.path)
            return
        logger.info("Loaded %d series from %s", len(self.cache), self.storage.path)

    def list_series(self) -> tuple[dict, ...]:
        return self.cache.list()

    def get_serie(self, serie_id: str) -> dict:
        serie = self.cache.find_by_id(serie_id)
        if serie is None:
            raise SerieNotFoundError(f"Serie {serie_id} not found")
        return serie

    def filter_by_gender(self, gender: str | None) -> list[dict]:
        if not gender:
            raise InvalidInputError("Gender not specified")
        logger.info("Searching series by gender: %s", gender)
        series = self.cache.filter_by_gender(gender)
        logger.info("Found %d series for gender %s", len(series), gender)
        if not series:
            raise NoMatchesError(f"No series found for gender {gender}")
        return series

    async def create_serie(self, name: Any, gender: Any, seasons: Any) -> dict:
        values = dict(zip(REQUIRED_FIELDS, (name, gender, seasons)))
        missing = [field for field, value in values.items() if is_missing(value)]
        if missing:
            raise InvalidInputError(f"Missing fields: {', '.join(missing)}")
        if has_non_finite(values):
            raise InvalidInputError("Infinity and NaN are not valid JSON values")
        serie = build_serie(name, gender, seasons)
        self.cache.append(serie)
        await self._persist()
        logger.info("Created serie %s", serie["id"])
        return serie

    async def update_serie(self, serie_id: str, fields: Mapping[str, Any]) -> dict:
        if has_non_finite(fields):
            raise InvalidInputError("Infinity and NaN are not valid JSON values")
        # storage errors from this reload propagate to the caller
        await self.cache.refresh()
        index = self.cache.index_of(serie_id)
        if index is None:
            raise SerieNotFoundError(f"Serie {serie_id} not found")
        serie = merge_serie(self.cache.get_at(index), fields)
        self.cache.replace_at(index, serie)
        await self._persist()
        logger.info("Updated serie %s", serie_id)
        return serie

    async def delete_serie(self, serie_id: str) -> None:
        index = self.cache.index_of(serie_id)
        if index is None:
            raise SerieNotFoundError(f"Serie {serie_id} not found")
        self.cache.remove_at(index)
        await self._persist()
        logger.info("Deleted serie %s", serie_id)

    async def _persist(self) -> None:
        try:
            await self.storage.save_all(self.cache.snapshot())
        except StorageError as exc:
            logger.exception("Could not persist series to %s", self.storage.path)
            raise PersistError(str(exc)) from exc
