"""Extractors package initialization."""
from app.extractors.fields import (
    extract_title,
    extract_description,
    extract_author,
    extract_author_url,
    extract_dates,
    extract_image,
    extract_publisher,
    extract_article_section,
)
from app.extractors.article_body import extract_article_body
from app.extractors.breadcrumbs import extract_breadcrumbs
from app.extractors.faq import extract_faqs

__all__ = [
    "extract_title",
    "extract_description",
    "extract_author",
    "extract_author_url",
    "extract_dates",
    "extract_image",
    "extract_publisher",
    "extract_article_section",
    "extract_article_body",
    "extract_breadcrumbs",
    "extract_faqs",
]
