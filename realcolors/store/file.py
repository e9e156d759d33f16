"""Filesystem store: every key lives in one JSON object on disk."""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path

from realcolors.config import DEFAULT_STORE_PATH
from realcolors.core.errors import StoreError
from realcolors.store.base import BaseStore


class FileStore(BaseStore):
    """
    JSON file store.

    File layout::

        {
            "DEVVIT_REAL_SUBREDDIT_COLORS": "<serialized snapshot>",
            ...
        }

    Writes go to a temporary file in the same directory which then replaces
    the original, so readers never see a half-written file.
    """

    def __init__(self, path: str | None = None) -> None:
        self._path = Path(path or DEFAULT_STORE_PATH)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _load_all(self) -> dict[str, str]:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            raise StoreError(f"store file {self._path} is not valid UTF-8 JSON: {exc}") from exc
        except OSError as exc:
            raise StoreError(f"cannot read store file {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"store file {self._path} does not hold a JSON object")
        return data

    def _save_all(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_path, self._path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise StoreError(f"cannot write store file {self._path}: {exc}") from exc

    def _get(self, key: str) -> str | None:
        value = self._load_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StoreError(f"value for {key!r} in {self._path} is not a string")
        return value

    def _set(self, key: str, value: str) -> None:
        data = self._load_all()
        data[key] = value
        self._save_all(data)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    # File I/O runs in a worker thread

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._get, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set, key, value)
