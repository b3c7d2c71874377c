"""
Static HTML fetch adapter for the Structured Data Scraper.
Used for article and breadcrumb scrapes, where no rendering is needed.
"""
from typing import Optional

import httpx

from app.config import config
from app.errors import FetchError
from app.utils.logger import LayerLogger


class HTMLFetcher:
    """
    Plain HTTP(S) GET with browser-like headers.
    Returns the full response body as text.
    """

    def __init__(
        self,
        timeout: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.transport = transport
        self.logger = LayerLogger("html_fetcher")

    async def fetch(self, url: str) -> str:
        """
        Fetch raw HTML for a URL.

        Non-2xx responses still return their body; only transport-level
        failures (DNS, connect, timeout, protocol) raise FetchError.
        """
        self.logger.log_action("fetch_html", "started", url=url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url, headers=self._get_headers())
                html = response.text
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.log_error(
                f"Failed to fetch URL: {str(e)}",
                error_type="http_error",
                url=url
            )
            raise FetchError(f"Failed to fetch {url}: {str(e) or type(e).__name__}", url=url) from e

        if response.is_error:
            self.logger.log_warning("non_success_status", url=url, status_code=response.status_code)

        self.logger.log_action(
            "fetch_html",
            "completed",
            url=url,
            status_code=response.status_code,
            content_length=len(html)
        )
        return html

    def _get_headers(self) -> dict:
        """Get request headers mimicking a browser."""
        return {
            "User-Agent": config.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "DNT": "1",
            "Upgrade-Insecure-Requests": "1",
        }
