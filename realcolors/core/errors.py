"""Error hierarchy for fetching, extracting and caching subreddit styles."""

from __future__ import annotations


class RealColorsError(Exception):
    """Base class for every error raised by realcolors."""


class SourceFormatError(RealColorsError):
    """The fetched page does not contain the community stylesheet container."""


class FetchError(RealColorsError):
    """The page could not be fetched: network failure, timeout or non-2xx status."""

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class CacheCorruptionError(RealColorsError):
    """A cache entry exists but cannot be decoded into a Snapshot."""

    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message)
        self.key = key


class StoreError(RealColorsError):
    """The key-value store could not be read from or written to."""


class InvalidSubredditError(RealColorsError, ValueError):
    """A subreddit name that cannot be turned into a page URL."""
