"""Heuristic extractors for CliftonStrengths report text.

Each extractor is a pure function over a bounded window of the text and
returns an empty result instead of raising when its section is missing.
"""

from .apply import extract_apply_section
from .blends import extract_blends
from .description import extract_description
from .insights import extract_insights
from .locator import ThemeMatch, locate_themes
from .participant import extract_participant_name
from .text import PdftotextExtractor, TextExtractor

__all__ = [
    "PdftotextExtractor",
    "TextExtractor",
    "ThemeMatch",
    "extract_apply_section",
    "extract_blends",
    "extract_description",
    "extract_insights",
    "extract_participant_name",
    "locate_themes",
]
