"""
Error types for the Structured Data Scraper.
"""
from typing import Optional


class FetchError(Exception):
    """
    Acquisition of a page failed.

    Raised for network failures, navigation timeouts and rendering
    session launch failures. Fatal for the scrape call, never retried.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        return self.message
