"""Configuration management using pydantic-settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables (STRENGTHSLENS_*)."""

    model_config = SettingsConfigDict(
        env_prefix="STRENGTHSLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Diagnostics
    include_diagnostics: bool = False  # Attach full raw text to parsed PDF reports
    diagnostics_preview_chars: int = Field(default=500, ge=0)
    image_pdf_text_threshold: int = 500  # Less text than this suggests a scanned PDF

    # PDF text extraction (poppler-utils)
    pdftotext_command: str = "pdftotext"
    pdftotext_timeout: int = Field(default=30, gt=0)  # seconds
    pdftotext_layout: bool = False

    # Extraction windows (characters scanned after a theme's first mention)
    description_window: int = Field(default=1500, gt=0)
    insights_window: int = Field(default=8000, gt=0)
    section_window: int = Field(default=10000, gt=0)  # blends and apply sections
    blends_section_cap: int = Field(default=3000, gt=0)
    apply_section_cap: int = Field(default=2000, gt=0)

    # Logging
    log_level: LogLevel = "WARNING"


# Global settings instance
settings = Settings()
