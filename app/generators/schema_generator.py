"""
Schema Generator for the Structured Data Scraper.
Turns an ExtractedData record into schema.org JSON-LD.
"""
from typing import Optional

from app.models.content import ExtractedData
from app.models.schema import (
    ArticleSchema,
    BreadcrumbListSchema,
    BreadcrumbListItem,
    FAQPageSchema,
    FAQQuestion,
    FAQAnswer,
    ImageObjectSchema,
    OrganizationSchema,
    PersonSchema,
    WebPageReference,
)
from app.utils.logger import LayerLogger
from app.utils.normalizers import ensure_trailing_slash


class SchemaGenerator:
    """
    Deterministic JSON-LD schema generator.

    Only fields present in the extracted record are emitted; nothing is
    inferred or filled in.
    """

    def __init__(self):
        self.logger = LayerLogger("schema_generator")

    def generate_article(self, data: ExtractedData, url: str) -> ArticleSchema:
        """Article schema; always produced, headline may be absent."""
        image = None
        if data.image:
            image = ImageObjectSchema(
                url=data.image.url,
                width=data.image.width,
                height=data.image.height,
            )

        author = None
        if data.author:
            author = PersonSchema(name=data.author, url=data.author_url)

        publisher = None
        if data.publisher_name:
            publisher = OrganizationSchema(
                name=data.publisher_name,
                logo=ImageObjectSchema(url=data.publisher_logo) if data.publisher_logo else None,
            )

        schema = ArticleSchema(
            headline=data.title,
            mainEntityOfPage=WebPageReference(id=url),
            description=data.description,
            image=image,
            author=author,
            publisher=publisher,
            datePublished=data.date_published,
            dateModified=data.date_modified,
            articleSection=data.article_section,
            articleBody=data.article_body,
        )
        self._log_generated("Article", url=url)
        return schema

    def generate_breadcrumbs(self, data: ExtractedData) -> Optional[BreadcrumbListSchema]:
        """BreadcrumbList schema, or None when there are no breadcrumbs."""
        if not data.breadcrumbs:
            self.logger.log_action("schema_generation", "skipped", schema_type="BreadcrumbList",
                                   reason="no_breadcrumbs")
            return None

        schema = BreadcrumbListSchema(
            itemListElement=[
                BreadcrumbListItem(
                    position=index + 1,
                    name=crumb.name,
                    item=ensure_trailing_slash(crumb.url),
                )
                for index, crumb in enumerate(data.breadcrumbs)
            ]
        )
        self._log_generated("BreadcrumbList", items=len(schema.itemListElement))
        return schema

    def generate_faq(self, data: ExtractedData) -> Optional[FAQPageSchema]:
        """FAQPage schema, or None when there are no FAQs."""
        if not data.faqs:
            self.logger.log_action("schema_generation", "skipped", schema_type="FAQPage",
                                   reason="no_faqs")
            return None

        schema = FAQPageSchema(
            mainEntity=[
                FAQQuestion(name=faq.question, acceptedAnswer=FAQAnswer(text=faq.answer))
                for faq in data.faqs
            ]
        )
        self._log_generated("FAQPage", items=len(schema.mainEntity))
        return schema

    def _log_generated(self, schema_type: str, **extra):
        self.logger.log_action(
            "schema_generation",
            "completed",
            schema_type=schema_type,
            **extra
        )
