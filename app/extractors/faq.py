"""
FAQ extraction.

Five detection methods are tried against the parsed page:

1. FAQPage microdata (itemtype/itemprop)
2. FAQPage JSON-LD in <script type="application/ld+json">
3. .faq-content h3 followed by an answer <div>
4. Any h3 immediately followed by a <p> or <div>
5. .faq-content .faq-item blocks with question/answer children

Methods 1 and 2 always run and accumulate together. Methods 3-5 are
fallbacks and only run while nothing has been found yet.
"""
import json
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from app.config import config
from app.models.content import FAQItem
from app.utils.logger import LayerLogger

logger = LayerLogger("faq_extractor")

FAQ_MICRODATA_SELECTOR = (
    '[itemtype="https://schema.org/FAQPage"], [itemtype="http://schema.org/FAQPage"]'
)
QUESTION_SELECTOR = "h3, h4, .faq-question"
ANSWER_SELECTOR = "div, p, .faq-answer"

Pair = Dict[str, str]


def _pair(question: Optional[str], answer: Optional[str]) -> Optional[Pair]:
    question = (question or "").strip()
    answer = (answer or "").strip()
    if question and answer:
        return {"question": question, "answer": answer}
    return None


def _text(elem: Optional[Tag]) -> str:
    return elem.get_text() if elem is not None else ""


# =============================================================================
# METHODS
# =============================================================================

def from_microdata(soup: BeautifulSoup) -> List[Pair]:
    pairs = []
    for container in soup.select(FAQ_MICRODATA_SELECTOR):
        for item in container.select('[itemprop="mainEntity"]'):
            pair = _pair(
                _text(item.select_one('[itemprop="name"]')),
                _text(item.select_one('[itemprop="acceptedAnswer"] [itemprop="text"]')),
            )
            if pair:
                pairs.append(pair)
    return pairs


def _flatten_jsonld(data: Any) -> List[Dict[str, Any]]:
    """Flatten top-level arrays and @graph containers into schema nodes."""
    nodes = []
    if isinstance(data, dict):
        if "@graph" in data:
            nodes.extend(_flatten_jsonld(data["@graph"]))
        if "@type" in data:
            nodes.append(data)
    elif isinstance(data, list):
        for item in data:
            nodes.extend(_flatten_jsonld(item))
    return nodes


def _answer_text(accepted: Any) -> Optional[str]:
    if isinstance(accepted, dict):
        value = accepted.get("text") or accepted.get("name")
        return value if isinstance(value, str) else None
    return None


def from_jsonld(soup: BeautifulSoup) -> List[Pair]:
    pairs = []
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            data = json.loads(script.string or "")
        except (json.JSONDecodeError, TypeError):
            # One broken payload must not hide the others
            continue

        for node in _flatten_jsonld(data):
            entities = node.get("mainEntity")
            if node.get("@type") != "FAQPage" or not isinstance(entities, list):
                continue
            for entity in entities:
                if not isinstance(entity, dict) or entity.get("@type") != "Question":
                    continue
                name = entity.get("name")
                pair = _pair(
                    name if isinstance(name, str) else None,
                    _answer_text(entity.get("acceptedAnswer")),
                )
                if pair:
                    pairs.append(pair)
    return pairs


def _next_block_sibling(elem: Tag) -> Optional[Tag]:
    """Next sibling element, skipping blank text and comments."""
    for sibling in elem.next_siblings:
        if isinstance(sibling, Comment):
            continue
        if isinstance(sibling, NavigableString):
            if sibling.strip():
                return None
            continue
        return sibling
    return None


def from_faq_content_headings(soup: BeautifulSoup) -> List[Pair]:
    pairs = []
    for heading in soup.select(".faq-content h3"):
        answer = _next_block_sibling(heading)
        if answer is None or answer.name != "div":
            continue
        pair = _pair(heading.get_text(), answer.get_text())
        if pair:
            pairs.append(pair)
    return pairs


def from_generic_headings(soup: BeautifulSoup) -> List[Pair]:
    pairs = []
    for heading in soup.find_all("h3"):
        answer = heading.find_next_sibling()
        if answer is None or answer.name not in ("p", "div"):
            continue
        pair = _pair(heading.get_text(), answer.get_text())
        if pair:
            pairs.append(pair)
    return pairs


def from_faq_items(soup: BeautifulSoup) -> List[Pair]:
    pairs = []
    for item in soup.select(".faq-content .faq-item"):
        question = item.select_one(QUESTION_SELECTOR)
        answers = [
            elem for elem in item.select(ANSWER_SELECTOR)
            if not elem.css.match(QUESTION_SELECTOR)
        ]
        pair = _pair(_text(question), _text(answers[0] if answers else None))
        if pair:
            pairs.append(pair)
    return pairs


# =============================================================================
# CASCADE
# =============================================================================

def _dedupe(pairs: List[Pair], limit: int) -> List[FAQItem]:
    seen = set()
    faqs = []
    for pair in pairs:
        key = pair["question"].lower()
        if key in seen:
            continue
        seen.add(key)
        faqs.append(FAQItem(**pair))
    return faqs[:limit]


def extract_faqs(soup: BeautifulSoup, limit: Optional[int] = None) -> List[FAQItem]:
    """
    Run the FAQ cascade. Never raises: any failure yields an empty list.
    """
    limit = config.MAX_FAQS if limit is None else limit
    try:
        pairs = from_microdata(soup)
        pairs.extend(from_jsonld(soup))

        if not pairs:
            pairs = from_faq_content_headings(soup)
        if not pairs:
            pairs = from_generic_headings(soup)
        if not pairs:
            pairs = from_faq_items(soup)

        return _dedupe(pairs, limit)
    except Exception as e:
        logger.log_error(
            f"FAQ extraction failed: {str(e)}",
            error_type=type(e).__name__,
        )
        return []
