"""
Structured Data Scraper - FastAPI Application
Main entry point with REST API endpoints.
"""
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from app.config import config
from app.errors import FetchError
from app.utils.logger import get_logger, set_trace_id
from app.layers.extraction import ExtractionLayer
from app.generators.schema_generator import SchemaGenerator
from app.models.content import ScrapeType


# Initialize layers
extraction_layer = ExtractionLayer()
schema_generator = SchemaGenerator()

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Shared browser lives for the whole process
    await extraction_layer.close()


# Initialize FastAPI app
app = FastAPI(
    title="Structured Data Scraper",
    description="Scrapes a page and generates schema.org JSON-LD (Article, BreadcrumbList, FAQPage)",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SchemaResponse(BaseModel):
    """Response model for schema endpoints."""
    url: str
    schema_type: str
    schema_jsonld: Dict[str, Any]
    script_tag: str
    trace_id: str


def _require_url(url: Optional[str]) -> str:
    if not url or not url.strip():
        raise HTTPException(status_code=400, detail="URL query parameter is required.")
    return url.strip()


async def _scrape(url: str, scrape_type: ScrapeType, label: str):
    try:
        return await extraction_layer.scrape(url, scrape_type)
    except FetchError as e:
        logger.error("scrape_error", error=str(e), url=url, scrape_type=scrape_type.value)
        raise HTTPException(status_code=500, detail=f"Failed to scrape {label} data: {str(e)}")


# API Routes
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/api/article", response_model=SchemaResponse)
async def article_schema(url: Optional[str] = Query(None, description="Page URL")):
    """Generate Article JSON-LD for a URL (static fetch)."""
    url = _require_url(url)
    trace_id = set_trace_id()
    logger.info("article_schema_request", url=url, trace_id=trace_id)

    data = await _scrape(url, ScrapeType.ARTICLE, "article")
    schema = schema_generator.generate_article(data, url)

    return SchemaResponse(
        url=url,
        schema_type="Article",
        schema_jsonld=schema.to_jsonld(),
        script_tag=schema.to_script_tag(),
        trace_id=trace_id,
    )


@app.get("/api/breadcrumbs", response_model=SchemaResponse)
async def breadcrumbs_schema(url: Optional[str] = Query(None, description="Page URL")):
    """Generate BreadcrumbList JSON-LD for a URL (static fetch)."""
    url = _require_url(url)
    trace_id = set_trace_id()
    logger.info("breadcrumbs_schema_request", url=url, trace_id=trace_id)

    data = await _scrape(url, ScrapeType.BREADCRUMBS, "breadcrumbs")
    schema = schema_generator.generate_breadcrumbs(data)
    if schema is None:
        raise HTTPException(status_code=400, detail="No breadcrumb data found on this page.")

    return SchemaResponse(
        url=url,
        schema_type="BreadcrumbList",
        schema_jsonld=schema.to_jsonld(),
        script_tag=schema.to_script_tag(),
        trace_id=trace_id,
    )


@app.get("/api/faqs", response_model=SchemaResponse)
async def faq_schema(url: Optional[str] = Query(None, description="Page URL")):
    """Generate FAQPage JSON-LD for a URL (rendered fetch)."""
    url = _require_url(url)
    trace_id = set_trace_id()
    logger.info("faq_schema_request", url=url, trace_id=trace_id)

    data = await _scrape(url, ScrapeType.FAQ, "FAQ")
    schema = schema_generator.generate_faq(data)
    if schema is None:
        raise HTTPException(status_code=400, detail="No FAQ data found on this page.")

    logger.info(
        "extracted_faq",
        faq=[{"question": f.question, "answer": f.answer[:100]} for f in data.faqs]
    )

    return SchemaResponse(
        url=url,
        schema_type="FAQPage",
        schema_jsonld=schema.to_jsonld(),
        script_tag=schema.to_script_tag(),
        trace_id=trace_id,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
