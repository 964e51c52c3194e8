"""
JSON file persistence adapter.

The whole collection lives in a single JSON array; every save rewrites the
file in one write. There is no temp-file + rename step, so a crash mid-write
can leave a truncated document behind.
"""

from __future__ import annotations

from pathlib import Path
import json

from starlette.concurrency import run_in_threadpool


class StorageError(Exception):
    """Base exception for the JSON document store."""


class StorageIOError(StorageError):
    """Raised when the document cannot be created, read or written."""


class StorageParseError(StorageError):
    """Raised when the document is not a JSON array of objects."""


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


class JsonStorage:
    """Load/save the full series collection from a JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    async def ensure_exists(self) -> None:
        await run_in_threadpool(self._ensure_exists)

    async def load_all(self) -> list[dict]:
        return await run_in_threadpool(self._load_all)

    async def save_all(self, collection: list[dict]) -> None:
        await run_in_threadpool(self._save_all, collection)

    def _ensure_exists(self) -> None:
        try:
            if self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps([]), encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(f"Could not create {self.path}: {exc}") from exc

    def _load_all(self) -> list[dict]:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise StorageIOError(f"Could not read {self.path}: {exc}") from exc
        try:
            data = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            # UnicodeDecodeError is a ValueError
            raise StorageParseError(f"Invalid JSON in {self.path}: {exc}") from exc
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise StorageParseError(f"{self.path} must hold a JSON array of objects")
        return data

    def _save_all(self, collection: list[dict]) -> None:
        try:
            payload = json.dumps(collection, ensure_ascii=False, indent=2, allow_nan=False)
        except ValueError as exc:
            raise StorageIOError(f"Could not serialize series for {self.path}: {exc}") from exc
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(f"Could not write {self.path}: {exc}") from exc
