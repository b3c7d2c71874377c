"""
Configuration management for the Structured Data Scraper.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3003"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")  # json or console

    # Static fetch settings (seconds)
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )

    # Rendering session settings (milliseconds unless noted)
    BROWSER_HEADLESS: bool = os.getenv("BROWSER_HEADLESS", "true").lower() == "true"
    NAVIGATION_TIMEOUT_MS: int = int(os.getenv("NAVIGATION_TIMEOUT_MS", "60000"))
    FAQ_WAIT_TIMEOUT_MS: int = int(os.getenv("FAQ_WAIT_TIMEOUT_MS", "8000"))
    SCROLL_STEP_PX: int = int(os.getenv("SCROLL_STEP_PX", "500"))
    SCROLL_INTERVAL_MS: int = int(os.getenv("SCROLL_INTERVAL_MS", "200"))

    # Extraction limits
    MAX_FAQS: int = int(os.getenv("MAX_FAQS", "20"))

    @classmethod
    def browser_launch_options(cls) -> dict:
        """Keyword arguments passed to chromium.launch()."""
        return {
            "headless": cls.BROWSER_HEADLESS,
            "args": [
                "--disable-blink-features=AutomationControlled",
                "--disable-dev-shm-usage",
                "--no-sandbox",
            ],
        }


config = Config()
