"""StrengthsLens - structured data from CliftonStrengths PDF reports."""

from .catalog import Domain, Theme, ThemeCatalog, default_catalog, normalize_theme_name
from .models import (
    ApplySection,
    ParsedStrengthsReport,
    ParsedTheme,
    ReportType,
    StrengthBlend,
    ValidationResult,
)
from .parser import (
    build_report,
    parse_strengths_file,
    parse_strengths_from_text,
    parse_strengths_pdf,
)
from .services.exceptions import StrengthsLensError, TextExtractionError
from .validation.report import validate_report

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Catalog
    "Domain",
    "Theme",
    "ThemeCatalog",
    "default_catalog",
    "normalize_theme_name",
    # Parsed data
    "ApplySection",
    "ParsedStrengthsReport",
    "ParsedTheme",
    "ReportType",
    "StrengthBlend",
    "ValidationResult",
    # Parsing
    "build_report",
    "parse_strengths_file",
    "parse_strengths_from_text",
    "parse_strengths_pdf",
    "validate_report",
    # Exceptions
    "StrengthsLensError",
    "TextExtractionError",
]
