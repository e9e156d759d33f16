"""StyleWatcher, the main orchestrator: cache-first reads and change detection."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from realcolors.config import Settings
from realcolors.core.types import RefreshResult, Snapshot
from realcolors.differ.snapshot_cache import SnapshotCache
from realcolors.differ.snapshot_diff import diff_snapshots
from realcolors.extractors.stylesheet import StyleExtractor
from realcolors.fetch.page_source import PageSource
from realcolors.store.base import BaseStore
from realcolors.triggers import TriggerEvent, is_styling_event

logger = logging.getLogger(__name__)

ChangeListener = Callable[[RefreshResult], Any]


class StyleWatcher:
    """
    Ties the page source, the stylesheet extractor and the snapshot cache
    together.

    Usage:
        watcher = StyleWatcher(store=FileStore())
        styles = await watcher.get_styles("pics")   # cached if available
        result = await watcher.refresh("pics")      # always re-fetches
        # result.changed -> whether the cache was overwritten
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        store: BaseStore | None = None,
        source: PageSource | None = None,
        extractor: StyleExtractor | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._source = source or PageSource(
            host=self.settings.host,
            url_template=self.settings.url_template,
            timeout=self.settings.fetch_timeout,
            user_agent=self.settings.user_agent,
        )
        self._extractor = extractor or StyleExtractor(
            style_element_id=self.settings.style_element_id,
        )
        self._cache = SnapshotCache(store, key=self.settings.cache_key)
        self._listeners: list[ChangeListener] = []

    @property
    def cache(self) -> SnapshotCache:
        return self._cache

    async def get_styles(self, subreddit: str) -> Snapshot:
        """
        Return the cached Snapshot when one exists, without touching the
        network. On a miss, fetch and extract a fresh one. The fresh result
        is not written back; only refresh() populates the cache.
        """
        cached = await self._cache.load()
        if cached is not None:
            return cached
        return await self.fetch_styles(subreddit)

    async def fetch_styles(self, subreddit: str) -> Snapshot:
        """Fetch the page and extract a Snapshot, bypassing the cache."""
        html = await self._source.fetch_html(subreddit)
        snapshot = self._extractor.extract(html)
        logger.info(
            "r/%s: %d variants, %d custom properties",
            subreddit, len(snapshot), snapshot.property_count,
        )
        return snapshot

    async def refresh(self, subreddit: str) -> RefreshResult:
        """
        Compare a fresh extraction against the cache and overwrite the cache
        when they differ (or when nothing was cached). Listeners are notified
        of changes.
        """
        previous = await self._cache.load()
        current = await self.fetch_styles(subreddit)

        if previous is None:
            result = RefreshResult(subreddit=subreddit, changed=True, snapshot=current)
            logger.info("r/%s: no cached styles, storing fresh snapshot", subreddit)
        else:
            changed = self._cache.has_changed(previous, current)
            result = RefreshResult(
                subreddit=subreddit,
                changed=changed,
                snapshot=current,
                previous=previous,
                delta=diff_snapshots(previous, current) if changed else None,
            )
            if changed:
                logger.info("r/%s: styles changed (%s)", subreddit, result.delta.summary())
            else:
                logger.info("r/%s: styles unchanged", subreddit)

        if result.changed:
            await self._cache.save(current)
            await self._notify(result)
        return result

    async def handle_event(self, event: TriggerEvent) -> RefreshResult | None:
        """Run refresh() for styling-relevant events; ignore everything else."""
        if not is_styling_event(event):
            logger.debug("ignoring %s event (action=%r)", event.type.value, event.action)
            return None
        return await self.refresh(event.subreddit)

    # ------------------------------------------------------------------
    # Change listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: ChangeListener) -> None:
        """Register a sync or async callable invoked with each changed RefreshResult."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        self._listeners.remove(listener)

    async def _notify(self, result: RefreshResult) -> None:
        for listener in list(self._listeners):
            outcome = listener(result)
            if inspect.isawaitable(outcome):
                await outcome
