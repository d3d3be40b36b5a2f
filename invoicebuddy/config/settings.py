"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Flat-file storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    indent: int = 2


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 3001
    debug: bool = False
    cors_origins: list[str] = ["*"]


class ReportSettings(BaseSettings):
    """Report and dashboard configuration."""

    model_config = SettingsConfigDict(env_prefix="REPORT_")

    recent_invoices_limit: int = 5
    currency_symbol: str = "$"


class PdfSettings(BaseSettings):
    """PDF export configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    company_name: str = "InvoiceBuddy"
    footer_text: str = "Generated by InvoiceBuddy"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "InvoiceBuddy"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept LOG_LEVEL=info as well as LOG_LEVEL=INFO."""
        return v.upper() if isinstance(v, str) else v


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
