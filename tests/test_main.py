"""Tests for app/main.py"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from app import main
from app.errors import FetchError
from app.models.content import BreadcrumbItem, ExtractedData, FAQItem, ScrapeType


@pytest.fixture
def scraper():
    scraper = MagicMock()
    scraper.scrape = AsyncMock(return_value=ExtractedData(
        title="Hello",
        breadcrumbs=[BreadcrumbItem(name="Home", url="https://ex.com/", position=1)],
        faqs=[FAQItem(question="Q1", answer="A1")],
    ))
    return scraper


@pytest.fixture
def client(scraper):
    with patch.object(main, "extraction_layer", scraper):
        yield TestClient(main.app)


class TestEndpoints:
    def test_health(self, client):
        assert client.get("/api/health").json()["status"] == "healthy"

    def test_article(self, client, scraper):
        response = client.get("/api/article", params={"url": "https://ex.com/p"})

        assert response.status_code == 200
        body = response.json()
        assert body["schema_type"] == "Article"
        assert body["schema_jsonld"]["headline"] == "Hello"
        assert body["script_tag"].startswith('<script type="application/ld+json">')
        scraper.scrape.assert_awaited_once_with("https://ex.com/p", ScrapeType.ARTICLE)

    def test_breadcrumbs(self, client, scraper):
        response = client.get("/api/breadcrumbs", params={"url": "https://ex.com/p"})

        assert response.status_code == 200
        assert response.json()["schema_jsonld"]["itemListElement"][0]["name"] == "Home"
        scraper.scrape.assert_awaited_once_with("https://ex.com/p", ScrapeType.BREADCRUMBS)

    def test_faqs(self, client, scraper):
        response = client.get("/api/faqs", params={"url": "https://ex.com/faq"})

        assert response.status_code == 200
        assert response.json()["schema_jsonld"]["mainEntity"][0]["name"] == "Q1"
        scraper.scrape.assert_awaited_once_with("https://ex.com/faq", ScrapeType.FAQ)


class TestErrors:
    @pytest.mark.parametrize("path", ["/api/article", "/api/breadcrumbs", "/api/faqs"])
    def test_missing_url(self, client, path):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json()["detail"] == "URL query parameter is required."

    def test_fetch_error_maps_to_500(self, client, scraper):
        scraper.scrape.side_effect = FetchError("Navigation timed out after 60s")
        response = client.get("/api/faqs", params={"url": "https://slow.example.com/"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to scrape FAQ data: Navigation timed out after 60s"

    def test_no_faqs_found(self, client, scraper):
        scraper.scrape.return_value = ExtractedData(title="No FAQ here")
        response = client.get("/api/faqs", params={"url": "https://ex.com/"})

        assert response.status_code == 400
        assert response.json()["detail"] == "No FAQ data found on this page."
