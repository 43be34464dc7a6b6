"""Report tier and confidence scoring from the number of located themes."""

from .models import ReportType


def determine_report_type(theme_count: int) -> ReportType:
    """Classify a report as Top 5, Top 10 or All 34."""
    if theme_count >= 30:
        return ReportType.ALL_34
    if theme_count >= 8:
        return ReportType.TOP_10
    return ReportType.TOP_5


def calculate_confidence(theme_count: int) -> float:
    """Score how closely the theme count matches a known report tier.

    Advisory only: callers use it to decide whether a human should review
    the parsed result.
    """
    # Exact tier sizes
    if theme_count == 34:
        return 0.98
    if theme_count in (10, 5):
        return 0.95

    # Near a tier size
    if 32 <= theme_count <= 34:
        return 0.9
    if 8 <= theme_count <= 12 or 4 <= theme_count <= 6:
        return 0.85

    if theme_count >= 3:
        return 0.7

    return min(theme_count * 0.15, 0.6)
