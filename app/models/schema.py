"""
Schema.org JSON-LD models for structured data generation.
These models keep the emitted JSON-LD deterministic.
"""
import json
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class SchemaBase(BaseModel):
    """Base class for all top-level schema.org types."""

    def to_jsonld(self) -> Dict[str, Any]:
        """Convert to JSON-LD format, excluding None values."""
        data = {"@context": "https://schema.org"}
        for key, value in self.model_dump(exclude_none=True, by_alias=True).items():
            if isinstance(value, list) and len(value) == 0:
                continue
            data[key] = value
        return data

    def to_script_tag(self) -> str:
        """Generate HTML script tag with JSON-LD."""
        return f'<script type="application/ld+json">\n{json.dumps(self.to_jsonld(), indent=2)}\n</script>'


class BreadcrumbListItem(BaseModel):
    """Item within a BreadcrumbList."""
    type: str = Field(default="ListItem", alias="@type")
    position: int
    name: str
    item: str  # URL


class BreadcrumbListSchema(SchemaBase):
    """BreadcrumbList schema for navigation."""
    type: str = Field(default="BreadcrumbList", alias="@type")
    itemListElement: List[BreadcrumbListItem] = Field(default_factory=list)


class FAQAnswer(BaseModel):
    """Answer within an FAQ."""
    type: str = Field(default="Answer", alias="@type")
    text: str


class FAQQuestion(BaseModel):
    """Question within an FAQ."""
    type: str = Field(default="Question", alias="@type")
    name: str
    acceptedAnswer: FAQAnswer


class FAQPageSchema(SchemaBase):
    """FAQPage schema for FAQ content."""
    type: str = Field(default="FAQPage", alias="@type")
    mainEntity: List[FAQQuestion] = Field(default_factory=list)


class ImageObjectSchema(BaseModel):
    """ImageObject for article images and publisher logos."""
    type: str = Field(default="ImageObject", alias="@type")
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class PersonSchema(BaseModel):
    """Person schema for authors."""
    type: str = Field(default="Person", alias="@type")
    name: str
    url: Optional[str] = None


class OrganizationSchema(BaseModel):
    """Organization schema for publishers."""
    type: str = Field(default="Organization", alias="@type")
    name: str
    logo: Optional[ImageObjectSchema] = None


class WebPageReference(BaseModel):
    """mainEntityOfPage reference."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(default="WebPage", alias="@type")
    id: str = Field(alias="@id")


class ArticleSchema(SchemaBase):
    """Article schema."""
    type: str = Field(default="Article", alias="@type")
    headline: Optional[str] = None
    mainEntityOfPage: WebPageReference
    description: Optional[str] = None
    image: Optional[ImageObjectSchema] = None
    author: Optional[PersonSchema] = None
    publisher: Optional[OrganizationSchema] = None
    datePublished: Optional[str] = None
    dateModified: Optional[str] = None
    articleSection: Optional[str] = None
    articleBody: Optional[str] = None
