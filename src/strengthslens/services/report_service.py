"""Report service - parse, validate and diagnose CliftonStrengths uploads.

Single responsibility: run the parser and validator together and explain
failed uploads, so callers (CLI, upload handlers) don't repeat that glue.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..config import settings
from ..models import ParsedStrengthsReport, ValidationResult
from ..validation.report import validate_report

if TYPE_CHECKING:
    from ..catalog import ThemeCatalog
    from ..extractors.text import TextExtractor

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200

IMAGE_PDF_MESSAGE = (
    "This PDF appears to be scanned/image-based. Please use the original digital "
    "PDF from Gallup's website (my.gallup.com)."
)
PARSE_FAILED_MESSAGE = "Failed to parse valid strengths data"


@dataclass(frozen=True)
class UploadDiagnostics:
    """Why an upload could not be parsed, for display to an admin."""

    message: str
    text_extracted: bool
    text_length: int
    text_preview: str
    participant_name: str | None
    is_likely_image_pdf: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "textExtracted": self.text_extracted,
            "textLength": self.text_length,
            "textPreview": self.text_preview,
            "participantName": self.participant_name,
            "isLikelyImagePdf": self.is_likely_image_pdf,
        }


@dataclass(frozen=True)
class ParseOutcome:
    """Parsed report plus its validation, and diagnostics when it failed."""

    report: ParsedStrengthsReport
    validation: ValidationResult
    diagnostics: UploadDiagnostics | None = None

    @property
    def success(self) -> bool:
        return self.validation.valid


def diagnose(report: ParsedStrengthsReport, text: str | None = None) -> UploadDiagnostics:
    """Summarize the extracted text of a failed upload.

    Very little text usually means a scanned PDF with no text layer.

    Args:
        report: The parsed report
        text: Text to inspect; defaults to the report's ``raw_text``
    """
    text = report.raw_text if text is None else text
    text = text or ""
    text_length = len(text)
    preview = re.sub(r"\s+", " ", text[:PREVIEW_CHARS]).strip()
    is_image_pdf = text_length < settings.image_pdf_text_threshold

    return UploadDiagnostics(
        message=IMAGE_PDF_MESSAGE if is_image_pdf else PARSE_FAILED_MESSAGE,
        text_extracted=text_length > 0,
        text_length=text_length,
        text_preview=f"{preview}..." if preview else "(only whitespace/formatting characters)",
        participant_name=report.participant_name,
        is_likely_image_pdf=is_image_pdf,
    )


class ReportService:
    """Service for parsing CliftonStrengths reports.

    Supports dependency injection for testing:
        service = ReportService(text_extractor=FakeExtractor("..."))
    """

    def __init__(
        self,
        catalog: "ThemeCatalog | None" = None,
        text_extractor: "TextExtractor | None" = None,
    ) -> None:
        self._catalog = catalog
        self._text_extractor = text_extractor

    def _outcome(self, report: ParsedStrengthsReport, text: str | None = None) -> ParseOutcome:
        validation = validate_report(report)
        for warning in validation.warnings:
            logger.warning("Report validation: %s", warning)
        if validation.valid:
            return ParseOutcome(report=report, validation=validation)

        for error in validation.errors:
            logger.error("Report validation failed: %s", error)
        return ParseOutcome(
            report=report,
            validation=validation,
            diagnostics=diagnose(report, text),
        )

    def parse_pdf(self, data: bytes, include_diagnostics: bool | None = None) -> ParseOutcome:
        """Parse and validate PDF bytes.

        Raises:
            TextExtractionError: If the PDF cannot be converted to text
        """
        from ..parser import parse_strengths_pdf

        report = parse_strengths_pdf(
            data,
            catalog=self._catalog,
            include_diagnostics=include_diagnostics,
            text_extractor=self._text_extractor,
        )
        return self._outcome(report)

    def parse_file(self, path: Path, include_diagnostics: bool | None = None) -> ParseOutcome:
        """Parse and validate a PDF on disk."""
        logger.info("Parsing CliftonStrengths PDF %s", path)
        return self.parse_pdf(path.read_bytes(), include_diagnostics=include_diagnostics)

    def parse_text(
        self,
        text: str,
        participant_name: str | None = None,
        include_diagnostics: bool = False,
    ) -> ParseOutcome:
        """Parse and validate already-extracted report text."""
        from ..parser import parse_strengths_from_text

        report = parse_strengths_from_text(
            text,
            participant_name,
            catalog=self._catalog,
            include_diagnostics=include_diagnostics,
        )
        return self._outcome(report, text)
