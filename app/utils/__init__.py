"""Utils package initialization."""
from app.utils.logger import get_logger, LayerLogger, set_trace_id, get_trace_id, scrape_context
from app.utils.normalizers import (
    make_absolute_url,
    ensure_trailing_slash,
    humanize_segment,
    format_date,
)

__all__ = [
    "get_logger",
    "LayerLogger",
    "set_trace_id",
    "get_trace_id",
    "scrape_context",
    "make_absolute_url",
    "ensure_trailing_slash",
    "humanize_segment",
    "format_date",
]
