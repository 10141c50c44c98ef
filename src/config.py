"""
Configuration settings for the application.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class QueryConfig:
    """Tunables consumed by the query pipeline and insights aggregator."""

    default_page_size: int = 20
    low_stock_threshold: int = 10
    top_rated_limit: int = 5


class Settings:
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Upstream catalog settings
    CATALOG_BASE_URL: str = os.getenv("CATALOG_BASE_URL", "https://dummyjson.com")
    CATALOG_TIMEOUT_SECONDS: float = float(os.getenv("CATALOG_TIMEOUT_SECONDS", "10"))
    MAX_PRODUCTS_PAGE_SIZE: int = int(os.getenv("MAX_PRODUCTS_PAGE_SIZE", "100"))

    # Listing / insights settings
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
    LOW_STOCK_THRESHOLD: int = int(os.getenv("LOW_STOCK_THRESHOLD", "10"))
    TOP_RATED_LIMIT: int = int(os.getenv("TOP_RATED_LIMIT", "5"))

    # CORS
    ALLOWED_ORIGIN: str | None = os.getenv("ALLOWED_ORIGIN")

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.
        """
        return self.ENVIRONMENT.lower() == "production"

    @property
    def allowed_origin(self) -> str:
        """Origin allowed to call the API from a browser."""
        if self.ALLOWED_ORIGIN:
            return self.ALLOWED_ORIGIN
        if self.is_production:
            return "http://tukitickets.duckdns.org:8080"
        return "http://localhost:8080"

    def query_config(self) -> QueryConfig:
        """Snapshot the listing/insights tunables into an immutable value."""
        return QueryConfig(
            default_page_size=self.DEFAULT_PAGE_SIZE,
            low_stock_threshold=self.LOW_STOCK_THRESHOLD,
            top_rated_limit=self.TOP_RATED_LIMIT,
        )

    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()
