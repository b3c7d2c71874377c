"""
Extraction Layer for the Structured Data Scraper.
Composes acquisition and the extractors into one ExtractedData per URL.
"""
from typing import Optional, Union

from bs4 import BeautifulSoup

from app.extractors import (
    extract_title,
    extract_description,
    extract_author,
    extract_author_url,
    extract_dates,
    extract_image,
    extract_publisher,
    extract_article_section,
    extract_article_body,
    extract_breadcrumbs,
    extract_faqs,
)
from app.layers.acquisition import AcquisitionLayer
from app.models.content import ExtractedData, ScrapeType
from app.utils.logger import LayerLogger, scrape_context


def extract_metadata(html: str, url: str) -> ExtractedData:
    """
    Parse HTML once and run every extractor over the same tree.

    Extractors only read the tree; the record is built in one step
    and is immutable afterwards.
    """
    soup = BeautifulSoup(html, "lxml")

    date_published, date_modified = extract_dates(soup)
    publisher_name, publisher_logo = extract_publisher(soup, url)

    return ExtractedData(
        title=extract_title(soup),
        description=extract_description(soup),
        author=extract_author(soup),
        author_url=extract_author_url(soup, url),
        date_published=date_published,
        date_modified=date_modified,
        image=extract_image(soup, url),
        article_section=extract_article_section(soup),
        article_body=extract_article_body(soup),
        publisher_name=publisher_name,
        publisher_logo=publisher_logo,
        breadcrumbs=extract_breadcrumbs(soup, url),
        faqs=extract_faqs(soup),
    )


class ExtractionLayer:
    """
    Extraction Layer - the single entry point for a scrape.

    scrape(url, type) -> ExtractedData, or raises FetchError when the
    page cannot be acquired. Missing fields are never errors.
    """

    def __init__(self, acquisition_layer: Optional[AcquisitionLayer] = None):
        self.logger = LayerLogger("extraction_layer")
        self.acquisition_layer = acquisition_layer or AcquisitionLayer()

    async def scrape(
        self,
        url: str,
        scrape_type: Union[ScrapeType, str] = ScrapeType.ARTICLE,
    ) -> ExtractedData:
        scrape_type = ScrapeType(scrape_type)
        with scrape_context(url, scrape_type.value):
            self.logger.log_action("scrape", "started", url=url)

            html = await self.acquisition_layer.acquire(url, scrape_type)
            data = extract_metadata(html, url)

            self.logger.log_extraction(
                url=url,
                fields_present=data.get_present_fields(),
                fields_missing=data.get_missing_fields(),
                breadcrumbs_count=len(data.breadcrumbs),
                faq_count=len(data.faqs),
            )
        return data

    async def close(self) -> None:
        """Release resources held by the acquisition layer."""
        await self.acquisition_layer.close()
