"""
Breadcrumb extraction.

DOM breadcrumb links are preferred; when the page has none, the trail is
synthesized from the URL path (Home + one entry per path segment).
"""
from typing import List, Optional
from urllib.parse import urlsplit, unquote

from bs4 import BeautifulSoup

from app.models.content import BreadcrumbItem
from app.utils.normalizers import make_absolute_url, ensure_trailing_slash, humanize_segment

BREADCRUMB_SELECTORS = (
    ".breadcrumb a",
    ".breadcrumbs a",
    '[typeof="BreadcrumbList"] a',
    'nav[aria-label*="bread" i] a',
)


def _from_dom(soup: BeautifulSoup, page_url: str) -> Optional[List[BreadcrumbItem]]:
    for selector in BREADCRUMB_SELECTORS:
        links = soup.select(selector)
        if not links:
            continue

        # First selector with any match decides, even if no link survives
        breadcrumbs = []
        for link in links:
            name = link.get_text().strip()
            href = link.get("href")
            if not name or not href:
                continue
            breadcrumbs.append(BreadcrumbItem(
                name=name,
                url=ensure_trailing_slash(make_absolute_url(href, page_url)),
                position=len(breadcrumbs) + 1,
            ))
        return breadcrumbs
    return None


def _from_url_path(page_url: str) -> List[BreadcrumbItem]:
    parts = urlsplit(page_url)
    origin = f"{parts.scheme}://{parts.netloc}"

    breadcrumbs = [BreadcrumbItem(name="Home", url=ensure_trailing_slash(origin), position=1)]

    current_path = ""
    for segment in (s for s in parts.path.split("/") if s):
        current_path += f"/{segment}"
        breadcrumbs.append(BreadcrumbItem(
            name=humanize_segment(unquote(segment)),
            url=ensure_trailing_slash(origin + current_path),
            position=len(breadcrumbs) + 1,
        ))
    return breadcrumbs


def extract_breadcrumbs(soup: BeautifulSoup, page_url: str) -> List[BreadcrumbItem]:
    """Breadcrumb trail with contiguous 1-based positions."""
    breadcrumbs = _from_dom(soup, page_url)
    if breadcrumbs is None:
        return _from_url_path(page_url)
    return breadcrumbs
