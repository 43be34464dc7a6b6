"""CliftonStrengths report parsing.

Turns a Gallup CliftonStrengths PDF (or its extracted text) into a
``ParsedStrengthsReport``: themes ranked by first appearance, each with
whatever personalized content the report tier includes.

Pipeline:
    text -> theme locator -> per-theme field extractors -> classifier

Heuristic misses surface as absent fields, never exceptions. Only a failure
of the PDF-to-text step raises (``TextExtractionError``).
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from .catalog import ThemeCatalog, default_catalog
from .classifier import calculate_confidence, determine_report_type
from .config import settings
from .extractors.apply import extract_apply_section
from .extractors.blends import extract_blends
from .extractors.description import extract_description
from .extractors.insights import extract_insights
from .extractors.locator import ThemeMatch, locate_themes
from .extractors.participant import extract_participant_name
from .extractors.text import PdftotextExtractor, TextExtractor
from .models import ParsedStrengthsReport, ParsedTheme

logger = logging.getLogger(__name__)


def _parse_theme(text: str, match: ThemeMatch, rank: int, catalog: ThemeCatalog) -> ParsedTheme:
    """Run the four field extractors over one theme's section of the text."""
    theme = match.theme
    insights = extract_insights(text, match)
    blends = extract_blends(text, match, catalog)

    return ParsedTheme(
        name=theme.name,
        slug=theme.slug,
        domain=theme.domain.slug,
        rank=rank,
        personalized_description=extract_description(text, match, catalog),
        personalized_insights=tuple(insights) if insights else None,
        strength_blends=tuple(blends) if blends else None,
        apply_section=extract_apply_section(text, match),
    )


def extract_themes(text: str, catalog: ThemeCatalog | None = None) -> list[ParsedTheme]:
    """Locate every theme in ``text`` and extract its personalized content."""
    if catalog is None:
        catalog = default_catalog()
    return [
        _parse_theme(text, match, rank, catalog)
        for rank, match in enumerate(locate_themes(text, catalog), start=1)
    ]


def build_report(
    participant_name: str | None,
    themes: Iterable[ParsedTheme],
    raw_text: str | None = None,
) -> ParsedStrengthsReport:
    """Assemble a report, deriving report type and confidence from the theme count.

    Also used directly for manually corrected theme lists.
    """
    themes = tuple(themes)
    return ParsedStrengthsReport(
        participant_name=participant_name,
        themes=themes,
        report_type=determine_report_type(len(themes)),
        confidence=calculate_confidence(len(themes)),
        raw_text=raw_text,
    )


def parse_strengths_from_text(
    text: str,
    participant_name: str | None = None,
    *,
    catalog: ThemeCatalog | None = None,
    include_diagnostics: bool = False,
) -> ParsedStrengthsReport:
    """Parse already-extracted report text.

    Args:
        text: Plain text of a CliftonStrengths report
        participant_name: Explicit name; the text is searched when omitted
        catalog: Theme catalog (defaults to the standard 34 themes)
        include_diagnostics: Attach the full text as ``raw_text``

    Returns:
        The parsed report
    """
    if catalog is None:
        catalog = default_catalog()
    themes = extract_themes(text, catalog)
    name = participant_name or extract_participant_name(text, catalog)

    return build_report(name, themes, raw_text=text if include_diagnostics else None)


def parse_strengths_pdf(
    data: bytes,
    *,
    catalog: ThemeCatalog | None = None,
    include_diagnostics: bool | None = None,
    text_extractor: TextExtractor | None = None,
) -> ParsedStrengthsReport:
    """Parse a CliftonStrengths PDF.

    ``raw_text`` always carries a short preview of the extracted text for
    upload diagnostics; with diagnostics enabled it carries the full text.

    Args:
        data: PDF file contents
        catalog: Theme catalog (defaults to the standard 34 themes)
        include_diagnostics: Attach the full text; defaults to the
            ``include_diagnostics`` setting
        text_extractor: PDF-to-text converter (defaults to pdftotext)

    Returns:
        The parsed report

    Raises:
        TextExtractionError: If the PDF cannot be converted to text
    """
    extractor = text_extractor or PdftotextExtractor()
    if include_diagnostics is None:
        include_diagnostics = settings.include_diagnostics

    text = extractor.extract(data)
    logger.debug("Extracted text length: %d", len(text))
    logger.debug("Text preview (first 500 chars): %s", text[:500])

    report = parse_strengths_from_text(text, catalog=catalog)

    logger.info(
        "Parsed %d themes (%s) for participant %s",
        len(report.themes),
        report.report_type.value,
        report.participant_name or "<unknown>",
    )
    logger.debug("Extracted themes: %s", [theme.name for theme in report.themes])

    raw_text = text if include_diagnostics else text[: settings.diagnostics_preview_chars]
    return replace(report, raw_text=raw_text)


def parse_strengths_file(path: Path, **kwargs) -> ParsedStrengthsReport:
    """Parse a CliftonStrengths PDF from disk. See ``parse_strengths_pdf``."""
    return parse_strengths_pdf(path.read_bytes(), **kwargs)
