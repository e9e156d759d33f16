"""Runtime settings: page host, stylesheet location, cache key and timeouts."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_HOST = "sh.reddit.com"
DEFAULT_URL_TEMPLATE = "https://{host}/r/{subreddit}"
DEFAULT_STYLE_ELEMENT_ID = "community-styles-style-element"
DEFAULT_CACHE_KEY = "DEVVIT_REAL_SUBREDDIT_COLORS"
DEFAULT_FETCH_TIMEOUT = 15.0  # seconds
DEFAULT_USER_AGENT = "realcolors/0.1 (+subreddit style watcher)"
DEFAULT_STORE_PATH = os.path.join(os.path.expanduser("~"), ".realcolors_cache", "store.json")

_ENV_PREFIX = "REALCOLORS_"


@dataclass
class Settings:
    """
    Keyword-configurable settings shared by the page source, the extractor
    and the snapshot cache.

    ``Settings.from_env()`` reads ``REALCOLORS_*`` variables (after loading a
    ``.env`` file, if one exists) and falls back to the module defaults.
    """

    host: str = DEFAULT_HOST
    url_template: str = DEFAULT_URL_TEMPLATE
    style_element_id: str = DEFAULT_STYLE_ELEMENT_ID
    cache_key: str = DEFAULT_CACHE_KEY
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    store_path: str = DEFAULT_STORE_PATH

    def __post_init__(self) -> None:
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout!r}")
        if not self.cache_key:
            raise ValueError("cache_key must not be empty")

    @classmethod
    def from_env(cls, env_file: str | None = None) -> Settings:
        load_dotenv(env_file)

        def _get(name: str, default: str) -> str:
            return os.environ.get(_ENV_PREFIX + name) or default

        raw_timeout = _get("FETCH_TIMEOUT", str(DEFAULT_FETCH_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"{_ENV_PREFIX}FETCH_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        return cls(
            host=_get("HOST", DEFAULT_HOST),
            url_template=_get("URL_TEMPLATE", DEFAULT_URL_TEMPLATE),
            style_element_id=_get("STYLE_ELEMENT_ID", DEFAULT_STYLE_ELEMENT_ID),
            cache_key=_get("CACHE_KEY", DEFAULT_CACHE_KEY),
            fetch_timeout=timeout,
            user_agent=_get("USER_AGENT", DEFAULT_USER_AGENT),
            store_path=os.path.expanduser(_get("STORE_PATH", DEFAULT_STORE_PATH)),
        )
