"""
Rendered-page adapter for FAQ scrapes.

FAQ content is often lazy-loaded or hidden behind a tab, so the page is
rendered in the shared browser, scrolled to the bottom, the FAQ tab is
clicked when one exists, and the final DOM is captured.
"""
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.adapters.browser_session import BrowserSession
from app.config import config
from app.errors import FetchError
from app.utils.logger import LayerLogger

SCROLL_TO_BOTTOM_SCRIPT = """
async ([distance, interval]) => {
    await new Promise((resolve) => {
        let totalHeight = 0;
        const timer = setInterval(() => {
            const scrollHeight = document.body ? document.body.scrollHeight : 0;
            window.scrollBy(0, distance);
            totalHeight += distance;
            if (totalHeight >= scrollHeight) {
                clearInterval(timer);
                resolve();
            }
        }, interval);
    });
}
"""

CLICK_FAQ_TAB_SCRIPT = """
([selectors, keywords]) => {
    for (const selector of selectors) {
        for (const el of document.querySelectorAll(selector)) {
            const text = (el.textContent || '').toLowerCase();
            if (keywords.some((keyword) => text.includes(keyword))) {
                el.click();
                return text.trim().slice(0, 80);
            }
        }
    }
    return null;
}
"""

FAQ_TRIGGER_SELECTORS = [
    "a",
    "button",
    '[role="tab"]',
    '[role="menuitem"]',
    ".tab",
    ".menu-item",
    ".nav-item",
    ".accordion-title",
    ".accordion-header",
]

FAQ_TRIGGER_KEYWORDS = ["faq", "frequently asked questions", "faqs"]

FAQ_READY_SELECTOR = '.faq-content, [itemtype="https://schema.org/FAQPage"], h3'


class PageRenderer:
    """Renders a page in the shared browser and returns its final HTML."""

    def __init__(self, session: BrowserSession):
        self.session = session
        self.logger = LayerLogger("page_renderer")

    async def render_faq_page(self, url: str) -> str:
        """
        Navigate, scroll, reveal FAQ panels and capture the rendered HTML.

        Raises:
            FetchError: navigation timed out or the browser failed
        """
        self.logger.log_action("render_page", "started", url=url)
        page = await self.session.open_page()

        try:
            await self._navigate(page, url)
            await page.evaluate(
                SCROLL_TO_BOTTOM_SCRIPT,
                [config.SCROLL_STEP_PX, config.SCROLL_INTERVAL_MS],
            )
            await self._reveal_faq(page, url)
            html = await page.content()
        except PlaywrightError as e:
            self.logger.log_error(
                f"Rendering failed: {str(e)}",
                error_type="render_error",
                url=url
            )
            raise FetchError(f"Failed to render {url}: {str(e)}", url=url) from e
        finally:
            await self.session.release(page)

        self.logger.log_action(
            "render_page",
            "completed",
            url=url,
            content_length=len(html)
        )
        return html

    async def _navigate(self, page, url: str) -> None:
        try:
            await page.goto(
                url,
                wait_until="networkidle",
                timeout=config.NAVIGATION_TIMEOUT_MS,
            )
        except PlaywrightTimeoutError as e:
            self.logger.log_error(
                f"Navigation timed out after {config.NAVIGATION_TIMEOUT_MS}ms",
                error_type="navigation_timeout",
                url=url
            )
            raise FetchError(
                f"Navigation to {url} timed out after {config.NAVIGATION_TIMEOUT_MS // 1000}s",
                url=url,
            ) from e

    async def _reveal_faq(self, page, url: str) -> Optional[str]:
        clicked = await page.evaluate(
            CLICK_FAQ_TAB_SCRIPT,
            [FAQ_TRIGGER_SELECTORS, FAQ_TRIGGER_KEYWORDS],
        )
        if clicked:
            self.logger.log_decision(
                decision="click_faq_trigger",
                reason="Interactive element mentions FAQ",
                url=url,
                element_text=clicked
            )

        try:
            await page.wait_for_selector(
                FAQ_READY_SELECTOR, state="attached", timeout=config.FAQ_WAIT_TIMEOUT_MS
            )
        except PlaywrightTimeoutError:
            self.logger.log_fallback(
                from_source="faq_wait",
                to_source="current_dom",
                reason=f"No FAQ selector after {config.FAQ_WAIT_TIMEOUT_MS}ms",
                url=url
            )
        return clicked
