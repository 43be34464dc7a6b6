"""Input models and parsed-report validation."""

from .models import ParseFileInput, ParseTextInput
from .report import validate_report

__all__ = [
    "ParseFileInput",
    "ParseTextInput",
    "validate_report",
]
