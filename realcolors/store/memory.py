"""In-process store, used by tests and one-off runs."""

from __future__ import annotations

from realcolors.store.base import BaseStore


class MemoryStore(BaseStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
