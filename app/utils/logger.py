"""
Structured logging for the scraper.

Every event carries the request trace id (when one is set) and, inside a
scrape, the target URL and scrape type, so adapter-level events such as
fetches and browser launches can be tied back to the API call that
caused them.
"""
import uuid
import logging
import structlog
from contextvars import ContextVar
from typing import Any, Dict, Optional

from app.config import config

trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)


def get_trace_id() -> Optional[str]:
    """Trace id of the current request, or None outside a request."""
    return trace_id_var.get()


def set_trace_id(trace_id: Optional[str] = None) -> str:
    """Start a new trace for the current context and return its id."""
    new_trace_id = trace_id or uuid.uuid4().hex[:8]
    trace_id_var.set(new_trace_id)
    return new_trace_id


def add_trace_id(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Processor stamping the active trace id onto each event."""
    trace_id = trace_id_var.get()
    if trace_id:
        event_dict.setdefault("trace_id", trace_id)
    return event_dict


def scrape_context(url: str, scrape_type: str):
    """Bind url/scrape_type to every event logged inside the block."""
    return structlog.contextvars.bound_contextvars(target_url=url, scrape_type=scrape_type)


def _log_level() -> int:
    level = logging.getLevelName(config.LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging():
    """Configure structlog processors and renderer from config."""
    processors = [
        structlog.contextvars.merge_contextvars,
        add_trace_id,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


class LayerLogger:
    """
    Logger bound to one component (layer, adapter or extractor).

    Events share a small vocabulary: decision_made, action_<status>,
    fallback_triggered, error_occurred and content_extracted.
    """

    def __init__(self, layer_name: str):
        self.layer_name = layer_name
        self.logger = get_logger(layer_name).bind(layer=layer_name)

    def log_decision(self, decision: str, reason: str, url: Optional[str] = None, **extra):
        """Log a choice between strategies."""
        self.logger.info("decision_made", decision=decision, reason=reason, url=url, **extra)

    def log_action(self, action: str, status: str = "started", **extra):
        self.logger.info(f"action_{status}", action=action, **extra)

    def log_fallback(self, from_source: str, to_source: str, reason: str, **extra):
        """Log that one strategy gave nothing and the next one is used."""
        self.logger.warning(
            "fallback_triggered",
            from_source=from_source,
            to_source=to_source,
            reason=reason,
            **extra
        )

    def log_warning(self, event: str, **extra):
        self.logger.warning(event, **extra)

    def log_error(self, error: str, error_type: str = "unknown", **extra):
        self.logger.error("error_occurred", error=error, error_type=error_type, **extra)

    def log_extraction(
        self,
        url: str,
        fields_present: list,
        fields_missing: list,
        **extra
    ):
        """Log which record fields an extraction pass produced."""
        self.logger.info(
            "content_extracted",
            url=url,
            fields_present=fields_present,
            fields_missing=fields_missing,
            **extra
        )


configure_logging()
