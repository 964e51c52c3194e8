from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote series_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from series_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def db_file(tmp_path, monkeypatch):
    """Point SERIES_DB_PATH at a temporary file and reset cached settings."""
    path = tmp_path / "database.json"
    monkeypatch.setenv("SERIES_DB_PATH", str(path))
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def seeded_db(db_file):
    db_file.write_text(
        json.dumps(
            [
                {"id": "s1", "name": "Dark", "gender": "Drama", "seasons": 3, "liked": False},
                {"id": "s2", "name": "The Office", "gender": "Comedy", "seasons": 9, "liked": True},
                {"id": "s3", "name": "Succession", "gender": "drama", "seasons": 4, "liked": False},
            ]
        ),
        encoding="utf-8",
    )
    return db_file
