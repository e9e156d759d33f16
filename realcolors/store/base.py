"""Abstract async key-value store."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseStore(ABC):
    """String keys to string values. Writes to a single key are atomic."""

    @abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None: ...
