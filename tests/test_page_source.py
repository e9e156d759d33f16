"""Tests for PageSource with Playwright's request API mocked out."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from realcolors.core.errors import FetchError, InvalidSubredditError, RealColorsError
from realcolors.fetch.page_source import PageSource, normalize_subreddit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def mock_playwright(*, status=200, body="<html></html>", get_error=None):
    """Return (patcher, context) where context is the mocked APIRequestContext."""
    response = MagicMock()
    response.status = status
    response.ok = 200 <= status < 300
    response.text = AsyncMock(return_value=body)

    context = MagicMock()
    context.get = AsyncMock(return_value=response, side_effect=get_error)
    context.dispose = AsyncMock()

    pw = MagicMock()
    pw.request.new_context = AsyncMock(return_value=context)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=pw)
    manager.__aexit__ = AsyncMock(return_value=False)

    patcher = patch("realcolors.fetch.page_source.async_playwright", return_value=manager)
    return patcher, context


# ---------------------------------------------------------------------------
# normalize_subreddit / url_for
# ---------------------------------------------------------------------------

class TestSubredditNames:
    @pytest.mark.parametrize("raw, expected", [
        ("pics", "pics"),
        ("r/pics", "pics"),
        ("/r/pics/", "pics"),
        ("  AskReddit ", "AskReddit"),
        ("R/ask_science", "ask_science"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_subreddit(raw) == expected

    @pytest.mark.parametrize("raw", ["", "r/", "pics/new", "a b", "../etc"])
    def test_rejects_invalid(self, raw):
        with pytest.raises(InvalidSubredditError):
            normalize_subreddit(raw)

    def test_invalid_name_is_package_error(self):
        with pytest.raises(RealColorsError):
            normalize_subreddit("pics/new")

    def test_default_url(self):
        assert PageSource().url_for("r/pics") == "https://sh.reddit.com/r/pics"

    def test_custom_host(self):
        assert PageSource(host="www.reddit.com").url_for("pics") == "https://www.reddit.com/r/pics"


# ---------------------------------------------------------------------------
# fetch_html
# ---------------------------------------------------------------------------

class TestFetchHtml:
    @pytest.mark.asyncio
    async def test_success_returns_body(self):
        patcher, context = mock_playwright(body="<html>styles</html>")
        with patcher:
            html = await PageSource(timeout=5).fetch_html("pics")
        assert html == "<html>styles</html>"
        context.get.assert_awaited_once_with("https://sh.reddit.com/r/pics", timeout=5000)
        context.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_user_agent_passed_to_context(self):
        patcher, _ = mock_playwright()
        with patcher as factory:
            await PageSource(user_agent="test-agent").fetch_html("pics")
        pw = factory.return_value.__aenter__.return_value
        pw.request.new_context.assert_awaited_once_with(user_agent="test-agent")

    @pytest.mark.asyncio
    async def test_http_error_status_raises(self):
        patcher, context = mock_playwright(status=404)
        with patcher, pytest.raises(FetchError) as info:
            await PageSource().fetch_html("doesnotexist")
        assert info.value.status == 404
        assert info.value.url == "https://sh.reddit.com/r/doesnotexist"
        context.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        patcher, context = mock_playwright(get_error=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))
        with patcher, pytest.raises(FetchError) as info:
            await PageSource().fetch_html("pics")
        assert info.value.status is None
        assert isinstance(info.value.__cause__, PlaywrightError)
        context.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        patcher, _ = mock_playwright(get_error=PlaywrightTimeoutError("Timeout 15000ms exceeded"))
        with patcher, pytest.raises(FetchError):
            await PageSource().fetch_html("pics")

    @pytest.mark.asyncio
    async def test_invalid_name_never_fetches(self):
        patcher, context = mock_playwright()
        with patcher, pytest.raises(InvalidSubredditError):
            await PageSource().fetch_html("not a name")
        context.get.assert_not_awaited()
