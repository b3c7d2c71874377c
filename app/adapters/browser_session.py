"""
Shared rendering session for the Structured Data Scraper.

One Chromium instance per process, launched lazily on first use and
reused afterwards. A disconnected browser is never reused: the next
acquire() tears it down and launches a fresh one.
"""
import asyncio
from typing import Any, Callable, Optional

from playwright.async_api import Browser, Page, async_playwright
from playwright.async_api import Error as PlaywrightError

from app.config import config
from app.errors import FetchError
from app.utils.logger import LayerLogger


class BrowserSession:
    """
    Owned handle on the shared browser.

    Contract:
    - acquire() returns a live Browser, launching or relaunching as needed
    - open_page() / release(page) bracket one tab per scrape
    - is_alive() reports whether the current browser can be reused
    - close() shuts everything down (application shutdown)
    """

    def __init__(self, playwright_factory: Callable[[], Any] = async_playwright):
        self._playwright_factory = playwright_factory
        self._playwright = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()
        self.logger = LayerLogger("browser_session")

    def is_alive(self) -> bool:
        """True when a launched browser is still connected."""
        return self._browser is not None and self._browser.is_connected()

    async def acquire(self) -> Browser:
        """Return the shared browser, launching it on first use."""
        if self.is_alive():
            return self._browser

        async with self._lock:
            # Another caller may have launched while we waited
            if self.is_alive():
                return self._browser

            if self._browser is not None:
                self.logger.log_fallback(
                    from_source="stale_browser",
                    to_source="new_browser",
                    reason="Browser disconnected, relaunching",
                )
                await self._shutdown()

            await self._launch()
            return self._browser

    async def open_page(self) -> Page:
        """Open a new tab in the shared browser."""
        browser = await self.acquire()
        try:
            return await browser.new_page(user_agent=config.USER_AGENT)
        except PlaywrightError as e:
            self.logger.log_error(
                f"Failed to open page: {str(e)}",
                error_type="page_open_error",
            )
            raise FetchError(f"Rendering session unavailable: {str(e)}") from e

    async def release(self, page: Page) -> None:
        """Close a tab opened with open_page()."""
        try:
            await page.close()
        except PlaywrightError as e:
            # Tab already gone with its browser; nothing left to release
            self.logger.log_action("page_close", "skipped", reason=str(e))

    async def close(self) -> None:
        """Shut the browser down."""
        async with self._lock:
            await self._shutdown()

    async def _launch(self) -> None:
        self.logger.log_action("browser_launch", "started", headless=config.BROWSER_HEADLESS)
        try:
            self._playwright = await self._playwright_factory().start()
            self._browser = await self._playwright.chromium.launch(
                **config.browser_launch_options()
            )
        except Exception as e:
            error_msg = str(e)
            if "playwright install" in error_msg.lower() or "executable doesn't exist" in error_msg.lower():
                self.logger.log_error(
                    "Playwright browsers not installed. Run: playwright install chromium",
                    error_type="browser_missing",
                )
            else:
                self.logger.log_error(
                    f"Failed to launch browser: {error_msg}",
                    error_type="browser_launch_error",
                )
            await self._shutdown()
            raise FetchError(f"Failed to launch rendering session: {error_msg}") from e

        self.logger.log_action("browser_launch", "completed")

    async def _shutdown(self) -> None:
        browser, playwright = self._browser, self._playwright
        self._browser = None
        self._playwright = None

        if browser is not None:
            try:
                await browser.close()
            except PlaywrightError as e:
                self.logger.log_action("browser_close", "skipped", reason=str(e))
        if playwright is not None:
            try:
                await playwright.stop()
            except PlaywrightError as e:
                self.logger.log_action("playwright_stop", "skipped", reason=str(e))
