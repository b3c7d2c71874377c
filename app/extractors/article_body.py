"""
Article body extraction.

Two phases:
1. Paragraph harvesting over known content selectors.
2. Whole-container text with boilerplate stripped, used when phase 1
   produced less than PARAGRAPH_TEXT_TARGET characters.
"""
import copy
import re
from typing import Optional

from bs4 import BeautifulSoup

PARAGRAPH_SELECTORS = (
    "article p",
    ".post-content p",
    ".entry-content p",
    ".article-content p",
    ".content p",
    "main p",
)

CONTAINER_SELECTORS = (
    '[property="articleBody"]',
    ".article-body",
    ".post-body",
    ".entry-body",
    ".article-content",
    ".post-content",
    ".entry-content",
    ".content-area",
    ".main-content",
    "article",
    ".content",
    "main",
)

BOILERPLATE_SELECTOR = ", ".join([
    "script", "style", "nav", "header", "footer",
    ".navigation", ".breadcrumb", ".social-share", ".comments", ".sidebar",
    ".related-posts", ".author-box", ".tags", ".categories", ".meta",
    ".advertisement", ".ads", ".social-media", ".share-buttons",
])

MIN_PARAGRAPH_COUNT = 5      # selector must match more than this many <p>
MIN_PARAGRAPH_LENGTH = 20    # shorter paragraphs are skipped
PARAGRAPH_TEXT_TARGET = 500  # below this, fall back to containers
MIN_BODY_LENGTH = 200        # results at or below this are discarded


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def _paragraph_text(soup: BeautifulSoup) -> str:
    best = ""
    for selector in PARAGRAPH_SELECTORS:
        paragraphs = soup.select(selector)
        if len(paragraphs) <= MIN_PARAGRAPH_COUNT:
            continue

        texts = [p.get_text().strip() for p in paragraphs]
        combined = " ".join(t for t in texts if len(t) > MIN_PARAGRAPH_LENGTH)
        if len(combined) > len(best):
            best = combined
    return best


def _container_text(soup: BeautifulSoup, current: str) -> str:
    best = current
    for selector in CONTAINER_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue

        # Work on a copy so the shared tree stays intact for other extractors
        clone = copy.copy(element)
        for unwanted in clone.select(BOILERPLATE_SELECTOR):
            unwanted.extract()

        text = collapse_whitespace(clone.get_text())
        if len(text) > len(best) and len(text) > MIN_BODY_LENGTH:
            best = text
    return best


def extract_article_body(soup: BeautifulSoup) -> Optional[str]:
    """Return the article text, or None when nothing over 200 chars is found."""
    text = _paragraph_text(soup)

    if len(text) < PARAGRAPH_TEXT_TARGET:
        text = _container_text(soup, text)

    text = collapse_whitespace(text)
    if len(text) > MIN_BODY_LENGTH:
        return text
    return None
