"""Adapters package initialization."""
from app.adapters.html_fetcher import HTMLFetcher
from app.adapters.browser_session import BrowserSession
from app.adapters.page_renderer import PageRenderer

__all__ = ["HTMLFetcher", "BrowserSession", "PageRenderer"]
