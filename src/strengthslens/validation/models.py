"""Input validation models using Pydantic.

These models validate CLI inputs before they reach the parser, providing
user-friendly error messages.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ParseFileInput(BaseModel):
    """Validated input for parsing a CliftonStrengths PDF."""

    pdf_path: Path = Field(description="Path to a Gallup CliftonStrengths PDF report")

    @field_validator("pdf_path")
    @classmethod
    def validate_pdf_exists(cls, v: Path) -> Path:
        """Validate the PDF exists and has the correct extension."""
        if not v.exists():
            raise ValueError(f"PDF file not found: {v}")
        if v.suffix.lower() != ".pdf":
            raise ValueError(f"Expected .pdf file, got: {v.suffix or '(no extension)'}")
        return v


class ParseTextInput(BaseModel):
    """Validated input for parsing already-extracted report text."""

    text_path: Path = Field(description="Path to a plain-text export of the report")
    participant_name: str | None = Field(
        default=None,
        min_length=1,
        max_length=100,
        description="Participant name, overriding the one found in the text",
    )

    @field_validator("text_path")
    @classmethod
    def validate_text_exists(cls, v: Path) -> Path:
        """Validate the text file exists."""
        if not v.is_file():
            raise ValueError(f"Text file not found: {v}")
        return v

    @field_validator("participant_name")
    @classmethod
    def strip_participant_name(cls, v: str | None) -> str | None:
        """Trim whitespace; blank names count as not given."""
        if v is None:
            return None
        v = v.strip()
        return v or None
