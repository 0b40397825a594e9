"""
Configuration management.
Simple .env based config, one Shopify store per deployment.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_VERSION = "2024-10"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Security
    ct_shared_secret: str = ""  # X-CT-Auth value, no fallback

    # Shopify
    shopify_store: str = ""  # e.g. "mystore.myshopify.com"
    shopify_admin_token: str = ""  # Admin API token (shpat_...)
    shopify_api_version: str = DEFAULT_API_VERSION
    http_timeout: float = 30.0

    # Product defaults
    default_vendor: str = "ChickenToday"
    default_product_type: str = "Poultry"
    default_weight_unit: str = "lb"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
