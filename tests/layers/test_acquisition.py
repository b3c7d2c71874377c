"""Tests for app/layers/acquisition.py"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.adapters.browser_session import BrowserSession
from app.adapters.html_fetcher import HTMLFetcher
from app.errors import FetchError
from app.layers.acquisition import AcquisitionLayer
from app.models.content import ScrapeType


@pytest.fixture
def fetcher():
    fetcher = MagicMock()
    fetcher.fetch = AsyncMock(return_value="<html>static</html>")
    return fetcher


@pytest.fixture
def renderer():
    renderer = MagicMock()
    renderer.render_faq_page = AsyncMock(return_value="<html>rendered</html>")
    return renderer


@pytest.fixture
def layer(fetcher, renderer):
    return AcquisitionLayer(html_fetcher=fetcher, session=MagicMock(), renderer=renderer)


class TestStrategySelection:
    @pytest.mark.parametrize("scrape_type", [ScrapeType.ARTICLE, ScrapeType.BREADCRUMBS, "article"])
    def test_static_types_use_fetcher(self, layer, fetcher, renderer, scrape_type):
        html = asyncio.run(layer.acquire("https://ex.com/", scrape_type))
        assert html == "<html>static</html>"
        fetcher.fetch.assert_awaited_once_with("https://ex.com/")
        renderer.render_faq_page.assert_not_awaited()

    def test_faq_uses_renderer(self, layer, fetcher, renderer):
        html = asyncio.run(layer.acquire("https://ex.com/faq", ScrapeType.FAQ))
        assert html == "<html>rendered</html>"
        renderer.render_faq_page.assert_awaited_once_with("https://ex.com/faq")
        fetcher.fetch.assert_not_awaited()

    def test_unknown_type_rejected(self, layer):
        with pytest.raises(ValueError):
            asyncio.run(layer.acquire("https://ex.com/", "product"))


class TestFailures:
    def test_article_unreachable_host(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        layer = AcquisitionLayer(
            html_fetcher=HTMLFetcher(transport=httpx.MockTransport(handler)),
            session=MagicMock(),
            renderer=MagicMock(),
        )
        with pytest.raises(FetchError):
            asyncio.run(layer.acquire("https://unreachable.invalid/", ScrapeType.ARTICLE))

    def test_faq_navigation_timeout(self, playwright_factory, mock_page):
        mock_page.goto.side_effect = PlaywrightTimeoutError("Timeout 60000ms exceeded.")
        layer = AcquisitionLayer(
            html_fetcher=MagicMock(),
            session=BrowserSession(playwright_factory=playwright_factory),
        )
        with pytest.raises(FetchError):
            asyncio.run(layer.acquire("https://unreachable.invalid/", ScrapeType.FAQ))

    def test_close_releases_session(self, fetcher, renderer):
        session = MagicMock()
        session.close = AsyncMock()
        layer = AcquisitionLayer(html_fetcher=fetcher, session=session, renderer=renderer)
        asyncio.run(layer.close())
        session.close.assert_awaited_once()
