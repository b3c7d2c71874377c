"""
Acquisition Layer for the Structured Data Scraper.
Chooses how a page is fetched based on the requested schema type.
"""
from typing import Optional

from app.adapters.browser_session import BrowserSession
from app.adapters.html_fetcher import HTMLFetcher
from app.adapters.page_renderer import PageRenderer
from app.models.content import ScrapeType
from app.utils.logger import LayerLogger


class AcquisitionLayer:
    """
    Acquisition Layer - picks a fetch strategy per scrape type.

    - article / breadcrumbs: static HTTP fetch
    - faq: rendered page with lazy-load scrolling and FAQ tab click

    Owns the rendering session; close() releases it.
    """

    def __init__(
        self,
        html_fetcher: Optional[HTMLFetcher] = None,
        session: Optional[BrowserSession] = None,
        renderer: Optional[PageRenderer] = None,
    ):
        self.logger = LayerLogger("acquisition_layer")
        self.html_fetcher = html_fetcher or HTMLFetcher()
        self.session = session or BrowserSession()
        self.renderer = renderer or PageRenderer(self.session)

    async def acquire(self, url: str, scrape_type: ScrapeType) -> str:
        """
        Return raw HTML for the URL.

        Raises:
            FetchError: the page could not be acquired
        """
        scrape_type = ScrapeType(scrape_type)

        if scrape_type == ScrapeType.FAQ:
            self.logger.log_decision(
                decision="use_page_renderer",
                reason="FAQ content may be lazy-loaded or behind a tab",
                url=url
            )
            return await self.renderer.render_faq_page(url)

        self.logger.log_decision(
            decision="use_html_fetcher",
            reason=f"Static HTML is sufficient for {scrape_type.value}",
            url=url
        )
        return await self.html_fetcher.fetch(url)

    async def close(self) -> None:
        """Shut down the rendering session."""
        await self.session.close()
