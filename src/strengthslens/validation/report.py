"""Structural checks over a parsed report."""

from ..models import ParsedStrengthsReport, ValidationResult

EXPECTED_MIN_THEMES = 5
MIN_CONFIDENCE = 0.7


def validate_report(report: ParsedStrengthsReport) -> ValidationResult:
    """Check a parsed report for structural problems.

    Errors mean the report should not be accepted as-is (no themes, duplicate
    ranks); warnings flag it for human review. Never raises.
    """
    errors: list[str] = []
    warnings: list[str] = []

    theme_count = len(report.themes)
    if theme_count == 0:
        errors.append("No strength themes found in the document")
    elif theme_count < EXPECTED_MIN_THEMES:
        warnings.append(
            f"Only {theme_count} themes found. Expected at least {EXPECTED_MIN_THEMES}."
        )

    seen_ranks: set[int] = set()
    for theme in report.themes:
        if theme.rank in seen_ranks:
            errors.append(f"Duplicate rank {theme.rank} found")
        seen_ranks.add(theme.rank)

    if not report.participant_name:
        warnings.append("Could not extract participant name from document")

    if report.confidence < MIN_CONFIDENCE:
        warnings.append(
            f"Low confidence score ({round(report.confidence * 100)}%). "
            "Manual verification recommended."
        )

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)
