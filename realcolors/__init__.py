from realcolors.config import Settings
from realcolors.core.errors import (
    CacheCorruptionError,
    FetchError,
    InvalidSubredditError,
    RealColorsError,
    SourceFormatError,
    StoreError,
)
from realcolors.core.types import (
    PropertyChange,
    RefreshResult,
    Snapshot,
    SnapshotDelta,
    Variant,
    is_custom_property,
)
from realcolors.core.watcher import StyleWatcher
from realcolors.differ import SnapshotCache, diff_snapshots, snapshots_differ
from realcolors.extractors import StyleExtractor
from realcolors.fetch import PageSource
from realcolors.store import BaseStore, FileStore, MemoryStore
from realcolors.triggers import EventType, TriggerEvent, is_styling_event

__all__ = [
    "Settings",
    "StyleWatcher",
    # Data model
    "PropertyChange",
    "RefreshResult",
    "Snapshot",
    "SnapshotDelta",
    "Variant",
    "is_custom_property",
    # Components
    "PageSource",
    "SnapshotCache",
    "StyleExtractor",
    "diff_snapshots",
    "snapshots_differ",
    # Stores
    "BaseStore",
    "FileStore",
    "MemoryStore",
    # Triggers
    "EventType",
    "TriggerEvent",
    "is_styling_event",
    # Errors
    "CacheCorruptionError",
    "FetchError",
    "InvalidSubredditError",
    "RealColorsError",
    "SourceFormatError",
    "StoreError",
]
