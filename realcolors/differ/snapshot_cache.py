"""Snapshot cache — holds the last extracted Snapshot under a single store key."""

from __future__ import annotations

import logging

from realcolors.config import DEFAULT_CACHE_KEY
from realcolors.core.errors import CacheCorruptionError, StoreError
from realcolors.core.types import Snapshot
from realcolors.differ.snapshot_diff import snapshots_differ
from realcolors.store.base import BaseStore

logger = logging.getLogger(__name__)


class SnapshotCache:
    """
    Single-slot cache: the most recent Snapshot, JSON-encoded under ``key``.

    A cache built without a store behaves as permanently empty: ``load()``
    returns None and ``save()`` raises StoreError. Entries are always
    replaced wholesale.
    """

    def __init__(self, store: BaseStore | None, key: str = DEFAULT_CACHE_KEY) -> None:
        self._store = store
        self.key = key

    @property
    def available(self) -> bool:
        return self._store is not None

    async def load(self) -> Snapshot | None:
        """Return the cached Snapshot, or None on a miss."""
        if self._store is None:
            logger.debug("no store configured; treating %s as a cache miss", self.key)
            return None

        raw = await self._store.get(self.key)
        if not raw:
            logger.debug("cache miss for %s", self.key)
            return None

        try:
            snapshot = Snapshot.from_json(raw)
        except (ValueError, RecursionError) as exc:
            # RecursionError: entry nested deeper than the JSON decoder allows
            logger.error("cache entry %s is corrupt: %s", self.key, exc)
            raise CacheCorruptionError(
                f"cache entry {self.key!r} could not be decoded: {exc}", key=self.key
            ) from exc
        logger.debug("cache hit for %s (%d variants)", self.key, len(snapshot))
        return snapshot

    async def save(self, snapshot: Snapshot) -> None:
        """Overwrite the cache entry with ``snapshot``."""
        if self._store is None:
            raise StoreError(f"cannot save {self.key!r}: no store configured")
        await self._store.set(self.key, snapshot.to_json())
        logger.debug("saved %s (%d variants)", self.key, len(snapshot))

    @staticmethod
    def has_changed(old: Snapshot, new: Snapshot) -> bool:
        return snapshots_differ(old, new)
