from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request, Response
from fastapi.responses import PlainTextResponse

from series_api.repositories.json_storage import StorageError
from series_api.services.series_service import (
    InvalidInputError,
    NoMatchesError,
    PersistError,
    SerieNotFoundError,
    SeriesService,
)

router = APIRouter(prefix="/series", tags=["series"])
logger = logging.getLogger(__name__)


def _get_series_service(request: Request) -> SeriesService:
    svc = getattr(getattr(request.app, "state", None), "series_service", None)
    if not svc:
        raise RuntimeError("SeriesService not configured")
    return svc


def _body_fields(payload: Any) -> dict:
    # a missing or non-object body counts as an empty one
    return payload if isinstance(payload, dict) else {}


@router.get("")
def list_series(request: Request):
    return list(_get_series_service(request).list_series())


@router.get("/gender/{gender}")
def series_by_gender(gender: str, request: Request):
    svc = _get_series_service(request)
    try:
        return svc.filter_by_gender(gender)
    except InvalidInputError:
        return PlainTextResponse("Gender not specified", status_code=400)
    except NoMatchesError:
        return PlainTextResponse("No series found for the specified genre", status_code=404)
    except Exception:
        logger.exception("Gender search failed for %r", gender)
        return PlainTextResponse("Error when searching for series", status_code=500)


@router.get("/{serie_id}")
def get_serie(serie_id: str, request: Request):
    try:
        return _get_series_service(request).get_serie(serie_id)
    except SerieNotFoundError:
        return PlainTextResponse("Serie not found", status_code=400)


@router.post("", status_code=201)
async def create_serie(request: Request, payload: Any = Body(None)):
    svc = _get_series_service(request)
    payload = _body_fields(payload)
    try:
        return await svc.create_serie(
            payload.get("name"), payload.get("gender"), payload.get("seasons")
        )
    except InvalidInputError:
        return PlainTextResponse("Insufficient data provided", status_code=400)
    except PersistError:
        return PlainTextResponse("Error adding series", status_code=500)
    except Exception:
        logger.exception("Unexpected error while creating a serie")
        return PlainTextResponse("Error processing the request", status_code=500)


@router.put("/{serie_id}")
async def update_serie(serie_id: str, request: Request, payload: Any = Body(None)):
    svc = _get_series_service(request)
    try:
        return await svc.update_serie(serie_id, _body_fields(payload))
    except InvalidInputError:
        return PlainTextResponse("Invalid data provided", status_code=400)
    except SerieNotFoundError:
        return PlainTextResponse("Serie not found", status_code=404)
    except (StorageError, PersistError):
        logger.exception("Could not update serie %s", serie_id)
        return PlainTextResponse("Error when updating the series.", status_code=500)


@router.delete("/{serie_id}", status_code=204)
async def delete_serie(serie_id: str, request: Request):
    svc = _get_series_service(request)
    try:
        await svc.delete_serie(serie_id)
    except SerieNotFoundError:
        return PlainTextResponse("Serie not found", status_code=404)
    except PersistError:
        return PlainTextResponse("Error writing to database", status_code=500)
    return Response(status_code=204)
