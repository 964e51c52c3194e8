"""
FastAPI application for the Series API.

Startup creates the JSON database if it is missing and warms the cache from
it. Failures there are logged only; the server keeps serving with whatever the
cache holds.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from series_api.core.config import Settings, get_settings
from series_api.core.logging_config import setup_logging
from series_api.repositories.json_storage import JsonStorage
from series_api.repositories.series_cache import SeriesCache
from series_api.routers import series as series_router
from series_api.services.series_service import SeriesService


def build_series_service(settings: Settings) -> SeriesService:
    storage = JsonStorage(settings.database_path)
    return SeriesService(SeriesCache(storage))


@asynccontextmanager
async def _lifespan(app: FastAPI):
    await app.state.series_service.bootstrap()
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn (``uvicorn series_api.app:app``)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="Series API", lifespan=_lifespan)
    app.state.settings = settings
    app.state.series_service = build_series_service(settings)
    app.include_router(series_router.router)
    return app


app = create_app()
