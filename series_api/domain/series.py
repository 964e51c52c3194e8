"""Domain helpers for series records."""
from __future__ import annotations

import math
import uuid
from typing import Any, Mapping

REQUIRED_FIELDS = ("name", "gender", "seasons")


def is_missing(value: Any) -> bool:
    """
    Return True for values treated as absent in a request body.

    None, False, zero, NaN and the empty string count as missing; empty lists
    and objects are present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value == ""
    return False


def has_non_finite(value: Any) -> bool:
    """True when a float infinity or NaN sits anywhere inside ``value``."""
    pending = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, float) and not math.isfinite(item):
            return True
        if isinstance(item, Mapping):
            pending.extend(item.values())
        elif isinstance(item, (list, tuple)):
            pending.extend(item)
    return False


def new_serie_id() -> str:
    return str(uuid.uuid4())


def build_serie(name: Any, gender: Any, seasons: Any) -> dict:
    return {
        "id": new_serie_id(),
        "name": name,
        "gender": gender,
        "seasons": seasons,
        "liked": False,
    }


def merge_serie(current: Mapping[str, Any], fields: Mapping[str, Any]) -> dict:
    """Shallow merge; any provided key wins, `id` included."""
    return {**current, **fields}
