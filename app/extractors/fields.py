"""
Field extractors for article metadata.

Each field is an ordered tuple of lookup strategies over the parsed
document. The first strategy returning a non-empty value wins; when
nothing matches the field is absent (None), never an error.
"""
from typing import Callable, Optional, Sequence, Tuple

from bs4 import BeautifulSoup

from app.models.content import ImageData
from app.utils.normalizers import make_absolute_url, format_date

Strategy = Callable[[BeautifulSoup], Optional[str]]


def first_match(strategies: Sequence[Strategy], soup: BeautifulSoup) -> Optional[str]:
    """Run strategies in order and return the first non-empty result."""
    for strategy in strategies:
        value = strategy(soup)
        if value:
            return value
    return None


def attr_of(selector: str, attr: str = "content") -> Strategy:
    """Strategy: stripped attribute of the first element matching selector."""
    def lookup(soup: BeautifulSoup) -> Optional[str]:
        elem = soup.select_one(selector)
        if elem is None:
            return None
        value = elem.get(attr)
        return value.strip() if isinstance(value, str) else None
    return lookup


def text_of(selector: str) -> Strategy:
    """Strategy: stripped text of the first element matching selector."""
    def lookup(soup: BeautifulSoup) -> Optional[str]:
        elem = soup.select_one(selector)
        return elem.get_text().strip() if elem is not None else None
    return lookup


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Safely parse integer from string."""
    if not value:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


# =============================================================================
# CASCADES
# =============================================================================

TITLE_STRATEGIES: Tuple[Strategy, ...] = (
    text_of("title"),
    attr_of('meta[property="og:title"]'),
    text_of("h1"),
)

DESCRIPTION_STRATEGIES: Tuple[Strategy, ...] = (
    attr_of('meta[name="description"]'),
    attr_of('meta[property="og:description"]'),
)

AUTHOR_STRATEGIES: Tuple[Strategy, ...] = (
    attr_of('meta[name="author"]'),
    attr_of('meta[property="article:author"]'),
    text_of('[itemprop="author"] [itemprop="name"]'),
)

AUTHOR_URL_SELECTORS = (
    '[rel="author"]',
    ".author a",
    ".byline a",
    ".article-author a",
    ".post-author a",
    ".entry-author a",
    'a[href*="/author/"]',
    'a[href*="/authors/"]',
    ".author-info a",
    ".author-name a",
)

DATE_SELECTOR = ", ".join([
    'meta[property^="article:published_time"]',
    'meta[property^="article:modified_time"]',
    'time[itemprop^="datePublished"]',
    'time[itemprop^="dateModified"]',
])


# =============================================================================
# EXTRACTORS
# =============================================================================

def extract_title(soup: BeautifulSoup) -> Optional[str]:
    """<title> -> og:title -> first <h1>."""
    return first_match(TITLE_STRATEGIES, soup)


def extract_description(soup: BeautifulSoup) -> Optional[str]:
    """meta description -> og:description."""
    return first_match(DESCRIPTION_STRATEGIES, soup)


def extract_author(soup: BeautifulSoup) -> Optional[str]:
    """meta author -> article:author -> author.name microdata."""
    return first_match(AUTHOR_STRATEGIES, soup)


def extract_author_url(soup: BeautifulSoup, base_url: str) -> Optional[str]:
    """Absolute href of the first author link found by AUTHOR_URL_SELECTORS."""
    for selector in AUTHOR_URL_SELECTORS:
        elem = soup.select_one(selector)
        if elem is not None and elem.get("href"):
            return make_absolute_url(elem["href"], base_url)
    return None


def extract_dates(soup: BeautifulSoup) -> Tuple[Optional[str], Optional[str]]:
    """
    Extract (date_published, date_modified).

    Elements are read in document order and the last one of each kind
    wins, so an unparseable final value leaves that date absent.
    """
    published = None
    modified = None

    for elem in soup.select(DATE_SELECTOR):
        prop = elem.get("property") or elem.get("itemprop")
        content = elem.get("content") or elem.get("datetime")
        if not prop or not content:
            continue

        if "published_time" in prop or "datePublished" in prop:
            published = format_date(content)
        if "modified_time" in prop or "dateModified" in prop:
            modified = format_date(content)

    return published, modified


def extract_image(soup: BeautifulSoup, base_url: str) -> Optional[ImageData]:
    """og:image (with its width/height) -> first <img> src."""
    og_image = attr_of('meta[property="og:image"]')(soup)
    if og_image:
        return ImageData(
            url=make_absolute_url(og_image, base_url),
            width=_parse_int(attr_of('meta[property="og:image:width"]')(soup)),
            height=_parse_int(attr_of('meta[property="og:image:height"]')(soup)),
        )

    img = soup.find("img")
    if img is not None and img.get("src"):
        return ImageData(url=make_absolute_url(img["src"], base_url))

    return None


def extract_publisher(soup: BeautifulSoup, base_url: str) -> Tuple[Optional[str], Optional[str]]:
    """Extract (publisher_name, publisher_logo)."""
    name = attr_of('meta[property="og:site_name"]')(soup) or None
    logo = attr_of('[itemprop="publisher"] [itemprop="logo"]')(soup) or None
    if logo:
        logo = make_absolute_url(logo, base_url)
    return name, logo


def extract_article_section(soup: BeautifulSoup) -> Optional[str]:
    """article:section meta only."""
    return attr_of('meta[property="article:section"]')(soup) or None
