"""
Configuration settings for sales report defaults and rendering.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SALES_REPORT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SALES_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rendering
    date_format: str = "%d/%m/%Y"
    html_css_class: str = "sales-report"

    # Preset defaults
    default_header_text: str = "Sales Report"
    default_footer_text: str = "Confidential"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
