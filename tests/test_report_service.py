"""Tests for the report service and upload diagnostics."""

import logging
from pathlib import Path

import pytest

from strengthslens.parser import build_report
from strengthslens.services import (
    ParseOutcome,
    ReportService,
    TextExtractionError,
    diagnose,
)
from strengthslens.services.report_service import IMAGE_PDF_MESSAGE, PARSE_FAILED_MESSAGE

UNRELATED_TEXT = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 12


class FailingExtractor:
    def extract(self, data: bytes) -> str:
        raise TextExtractionError("pdftotext failed: broken xref table")


class TestReportService:
    """Test ReportService class."""

    def test_parse_pdf_success(self, sample_text: str, make_extractor) -> None:
        service = ReportService(text_extractor=make_extractor(sample_text))
        outcome = service.parse_pdf(b"%PDF-1.4")

        assert isinstance(outcome, ParseOutcome)
        assert outcome.success is True
        assert outcome.diagnostics is None
        assert outcome.report.participant_name == "Jane Smith"
        assert len(outcome.report.themes) == 5

    def test_parse_file(self, tmp_path: Path, sample_text: str, make_extractor) -> None:
        pdf = tmp_path / "jane.pdf"
        pdf.write_bytes(b"%PDF-1.4 jane")
        extractor = make_extractor(sample_text)

        outcome = ReportService(text_extractor=extractor).parse_file(pdf)

        assert extractor.calls == [b"%PDF-1.4 jane"]
        assert outcome.success is True

    def test_image_pdf_diagnostics(self, make_extractor) -> None:
        """Test a PDF with no text layer is reported as likely scanned."""
        service = ReportService(text_extractor=make_extractor("\n\x0c\n"))
        outcome = service.parse_pdf(b"%PDF-1.4")

        assert outcome.success is False
        assert outcome.diagnostics is not None
        assert outcome.diagnostics.is_likely_image_pdf is True
        assert outcome.diagnostics.message == IMAGE_PDF_MESSAGE
        assert outcome.diagnostics.text_extracted is True
        assert outcome.diagnostics.text_length == 3
        assert outcome.diagnostics.text_preview == "(only whitespace/formatting characters)"

    def test_unparseable_text_diagnostics(self) -> None:
        outcome = ReportService().parse_text(UNRELATED_TEXT)

        assert outcome.success is False
        assert outcome.validation.errors == ["No strength themes found in the document"]
        assert outcome.diagnostics.message == PARSE_FAILED_MESSAGE
        assert outcome.diagnostics.is_likely_image_pdf is False
        assert outcome.diagnostics.text_length == len(UNRELATED_TEXT)
        assert outcome.diagnostics.text_preview.endswith("...")
        assert len(outcome.diagnostics.text_preview) <= 203

    def test_parse_text_with_name(self, sample_text: str) -> None:
        outcome = ReportService().parse_text(sample_text, "Janet Smith")
        assert outcome.report.participant_name == "Janet Smith"
        assert outcome.report.raw_text is None

    def test_extraction_errors_propagate(self) -> None:
        service = ReportService(text_extractor=FailingExtractor())
        with pytest.raises(TextExtractionError, match="broken xref"):
            service.parse_pdf(b"%PDF-1.4")

    def test_logs_validation_warnings(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="strengthslens"):
            ReportService().parse_text("1. Achiever ®\n2. Woo ®\n")

        messages = [record.getMessage() for record in caplog.records]
        assert "Report validation: Only 2 themes found. Expected at least 5." in messages


class TestDiagnose:
    """Test diagnose function."""

    def test_uses_raw_text_by_default(self) -> None:
        report = build_report(None, [], raw_text="short text")
        diagnostics = diagnose(report)
        assert diagnostics.text_length == 10
        assert diagnostics.text_preview == "short text..."
        assert diagnostics.is_likely_image_pdf is True

    def test_no_text(self) -> None:
        diagnostics = diagnose(build_report(None, []))
        assert diagnostics.text_extracted is False
        assert diagnostics.text_length == 0

    def test_to_dict(self) -> None:
        data = diagnose(build_report("Jane Smith", []), text="abc").to_dict()
        assert data == {
            "message": IMAGE_PDF_MESSAGE,
            "textExtracted": True,
            "textLength": 3,
            "textPreview": "abc...",
            "participantName": "Jane Smith",
            "isLikelyImagePdf": True,
        }
