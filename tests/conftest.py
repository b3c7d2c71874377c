"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bs4 import BeautifulSoup

PAGE_URL = "https://blog.example.com/guides/home-loans/"

LONG_PARAGRAPH = (
    "Home loans in the current market depend heavily on credit history, "
    "income stability and the size of the down payment you can offer."
)


def make_soup(html: str) -> BeautifulSoup:
    """Parse an HTML snippet the same way the extraction layer does."""
    return BeautifulSoup(html, "lxml")


@pytest.fixture
def page_url():
    return PAGE_URL


@pytest.fixture
def article_html():
    """A realistic article page with meta tags, breadcrumbs and FAQ JSON-LD."""
    paragraphs = "\n".join(f"<p>{LONG_PARAGRAPH} Part {i}.</p>" for i in range(8))
    return f"""
    <html>
    <head>
      <title>  Guide to Home Loans  </title>
      <meta name="description" content="Everything about home loans.">
      <meta name="author" content="Jane Doe">
      <meta property="og:site_name" content="Example Blog">
      <meta property="og:image" content="/img/cover.jpg">
      <meta property="og:image:width" content="1200">
      <meta property="og:image:height" content="630">
      <meta property="article:section" content="Finance">
      <meta property="article:published_time" content="2024-03-01T10:00:00+02:00">
      <meta property="article:modified_time" content="2024-03-05">
      <script type="application/ld+json">
        {{"@type": "FAQPage", "mainEntity": [
          {{"@type": "Question", "name": "What is a home loan?",
            "acceptedAnswer": {{"@type": "Answer", "text": "A loan to buy a house."}}}}
        ]}}
      </script>
    </head>
    <body>
      <nav class="breadcrumb">
        <a href="/">Home</a>
        <a href="/guides">Guides</a>
        <a href="/guides/home-loans?ref=nav">Home Loans</a>
      </nav>
      <div class="byline">By <a href="/author/jane-doe">Jane Doe</a></div>
      <article>
        <h1>Guide to Home Loans</h1>
        {paragraphs}
      </article>
      <div itemprop="publisher" itemscope>
        <meta itemprop="logo" content="/img/logo.png">
      </div>
    </body>
    </html>
    """


@pytest.fixture
def mock_page():
    """Playwright page double with async methods."""
    page = MagicMock()
    page.goto = AsyncMock()
    page.evaluate = AsyncMock(return_value=None)
    page.wait_for_selector = AsyncMock()
    page.content = AsyncMock(return_value="<html><body><h3>Q</h3><p>A</p></body></html>")
    page.close = AsyncMock()
    return page


@pytest.fixture
def mock_browser(mock_page):
    """Connected Playwright browser double."""
    browser = MagicMock()
    browser.is_connected.return_value = True
    browser.new_page = AsyncMock(return_value=mock_page)
    browser.close = AsyncMock()
    return browser


@pytest.fixture
def playwright_factory(mock_browser):
    """Stand-in for async_playwright(): factory().start() -> playwright."""
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=mock_browser)
    playwright.stop = AsyncMock()

    manager = MagicMock()
    manager.start = AsyncMock(return_value=playwright)

    factory = MagicMock(return_value=manager)
    factory.playwright = playwright
    return factory
