"""
Extracted Data Model for the Structured Data Scraper.
One ExtractedData record is produced per scrape call and handed to the
schema generator. Every field is optional: absence is a valid outcome.
"""
from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class ScrapeType(str, Enum):
    """Schema type requested by the caller; drives page acquisition."""
    ARTICLE = "article"
    BREADCRUMBS = "breadcrumbs"
    FAQ = "faq"


class ImageData(BaseModel):
    """Representative image of the page."""
    model_config = ConfigDict(frozen=True)

    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class FAQItem(BaseModel):
    """FAQ question and answer pair."""
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


class BreadcrumbItem(BaseModel):
    """Breadcrumb navigation item (position is 1-based)."""
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    position: int = Field(ge=1)


class ExtractedData(BaseModel):
    """
    Extracted page metadata - the contract between the extraction
    layer and the schema generator.

    Field names are snake_case; aliases give the camelCase names used
    in API payloads (authorUrl, datePublished, ...).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    author_url: Optional[str] = Field(default=None, alias="authorUrl")
    date_published: Optional[str] = Field(default=None, alias="datePublished")
    date_modified: Optional[str] = Field(default=None, alias="dateModified")
    image: Optional[ImageData] = None
    article_section: Optional[str] = Field(default=None, alias="articleSection")
    article_body: Optional[str] = Field(default=None, alias="articleBody")
    publisher_name: Optional[str] = Field(default=None, alias="publisherName")
    publisher_logo: Optional[str] = Field(default=None, alias="publisherLogo")
    breadcrumbs: List[BreadcrumbItem] = Field(default_factory=list)
    faqs: List[FAQItem] = Field(default_factory=list)

    def get_present_fields(self) -> List[str]:
        """Return list of non-empty fields."""
        return [name for name, value in self if value]

    def get_missing_fields(self) -> List[str]:
        """Return list of empty fields."""
        return [name for name, value in self if not value]
