"""Page source: fetches a subreddit page's HTML over HTTP via Playwright."""

from __future__ import annotations

import logging
import re

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from realcolors.config import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_HOST,
    DEFAULT_URL_TEMPLATE,
    DEFAULT_USER_AGENT,
)
from realcolors.core.errors import FetchError, InvalidSubredditError

logger = logging.getLogger(__name__)

_SUBREDDIT_RE = re.compile(r"^[A-Za-z0-9_]+$")


def normalize_subreddit(name: str) -> str:
    """Strip an ``r/`` or ``/r/`` prefix and validate the remaining name."""
    cleaned = name.strip()
    for prefix in ("/r/", "r/"):
        if cleaned.lower().startswith(prefix):
            cleaned = cleaned[len(prefix):]
            break
    cleaned = cleaned.rstrip("/")
    if not _SUBREDDIT_RE.match(cleaned):
        raise InvalidSubredditError(f"invalid subreddit name: {name!r}")
    return cleaned


class PageSource:
    """
    Fetches ``https://<host>/r/<subreddit>`` with Playwright's request API.

    No browser is launched; only the HTTP client is used. Every failure
    (network error, timeout, non-2xx status) surfaces as FetchError and is
    not retried.
    """

    def __init__(
        self,
        *,
        host: str = DEFAULT_HOST,
        url_template: str = DEFAULT_URL_TEMPLATE,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.host = host
        self.url_template = url_template
        self.timeout = timeout
        self.user_agent = user_agent

    def url_for(self, subreddit: str) -> str:
        return self.url_template.format(host=self.host, subreddit=normalize_subreddit(subreddit))

    async def fetch_html(self, subreddit: str) -> str:
        url = self.url_for(subreddit)
        logger.info("fetching %s", url)
        async with async_playwright() as pw:
            context = await pw.request.new_context(user_agent=self.user_agent)
            try:
                response = await context.get(url, timeout=self.timeout * 1000)
                if not response.ok:
                    raise FetchError(
                        f"GET {url} returned HTTP {response.status}",
                        url=url,
                        status=response.status,
                    )
                html = await response.text()
            except PlaywrightError as exc:
                # Also covers playwright's TimeoutError
                raise FetchError(f"GET {url} failed: {exc}", url=url) from exc
            finally:
                await context.dispose()
        logger.debug("fetched %s: %d characters", url, len(html))
        return html
