"""Service layer for StrengthsLens.

- ReportService: parse, validate and diagnose report uploads
"""

from .exceptions import StrengthsLensError, TextExtractionError
from .report_service import ParseOutcome, ReportService, UploadDiagnostics, diagnose

__all__ = [
    "ReportService",
    # Types
    "ParseOutcome",
    "UploadDiagnostics",
    "diagnose",
    # Exceptions
    "StrengthsLensError",
    "TextExtractionError",
]
