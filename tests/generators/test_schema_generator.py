"""Tests for app/generators/schema_generator.py"""

import json

import pytest

from app.generators.schema_generator import SchemaGenerator
from app.models.content import BreadcrumbItem, ExtractedData, FAQItem, ImageData


@pytest.fixture
def generator():
    return SchemaGenerator()


class TestArticle:
    def test_minimal_article(self, generator):
        schema = generator.generate_article(ExtractedData(title="Hello"), "https://ex.com/p")
        assert schema.to_jsonld() == {
            "@context": "https://schema.org",
            "@type": "Article",
            "headline": "Hello",
            "mainEntityOfPage": {"@type": "WebPage", "@id": "https://ex.com/p"},
        }

    def test_full_article(self, generator):
        data = ExtractedData(
            title="Hello",
            description="Desc",
            author="Jane",
            author_url="https://ex.com/author/jane",
            image=ImageData(url="https://ex.com/a.jpg", width=1200),
            publisher_name="Example",
            publisher_logo="https://ex.com/logo.png",
            date_published="2024-01-01T00:00:00.000Z",
            article_section="Tech",
            article_body="Body text",
        )
        jsonld = generator.generate_article(data, "https://ex.com/p").to_jsonld()

        assert jsonld["author"] == {"@type": "Person", "name": "Jane", "url": "https://ex.com/author/jane"}
        assert jsonld["image"] == {"@type": "ImageObject", "url": "https://ex.com/a.jpg", "width": 1200}
        assert jsonld["publisher"] == {
            "@type": "Organization",
            "name": "Example",
            "logo": {"@type": "ImageObject", "url": "https://ex.com/logo.png"},
        }
        assert jsonld["datePublished"] == "2024-01-01T00:00:00.000Z"
        assert "dateModified" not in jsonld
        assert jsonld["articleSection"] == "Tech"
        assert jsonld["articleBody"] == "Body text"

    def test_author_url_without_author_ignored(self, generator):
        data = ExtractedData(title="T", author_url="https://ex.com/author/x")
        assert "author" not in generator.generate_article(data, "https://ex.com/").to_jsonld()


class TestBreadcrumbs:
    def test_breadcrumb_list(self, generator):
        data = ExtractedData(breadcrumbs=[
            BreadcrumbItem(name="Home", url="https://ex.com/", position=1),
            BreadcrumbItem(name="Blog", url="https://ex.com/blog", position=2),
        ])
        jsonld = generator.generate_breadcrumbs(data).to_jsonld()
        assert jsonld["@type"] == "BreadcrumbList"
        assert jsonld["itemListElement"] == [
            {"@type": "ListItem", "position": 1, "name": "Home", "item": "https://ex.com/"},
            {"@type": "ListItem", "position": 2, "name": "Blog", "item": "https://ex.com/blog/"},
        ]

    def test_no_breadcrumbs(self, generator):
        assert generator.generate_breadcrumbs(ExtractedData()) is None


class TestFaq:
    def test_faq_page(self, generator):
        data = ExtractedData(faqs=[FAQItem(question="Q1", answer="A1")])
        jsonld = generator.generate_faq(data).to_jsonld()
        assert jsonld == {
            "@context": "https://schema.org",
            "@type": "FAQPage",
            "mainEntity": [
                {"@type": "Question", "name": "Q1", "acceptedAnswer": {"@type": "Answer", "text": "A1"}},
            ],
        }

    def test_no_faqs(self, generator):
        assert generator.generate_faq(ExtractedData()) is None


class TestScriptTag:
    def test_script_tag_wraps_json(self, generator):
        data = ExtractedData(faqs=[FAQItem(question="Q1", answer="A1")])
        tag = generator.generate_faq(data).to_script_tag()

        assert tag.startswith('<script type="application/ld+json">\n')
        assert tag.endswith("\n</script>")
        body = tag[len('<script type="application/ld+json">\n'):-len("\n</script>")]
        assert json.loads(body)["@type"] == "FAQPage"
