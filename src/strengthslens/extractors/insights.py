"""Personalized insights from the "Why Your <Theme> Is Unique" section."""

import re

from ..catalog import name_regex
from ..config import settings
from .cleaning import clean_text, in_range
from .locator import ThemeMatch
from .sections import (
    CLIFTONSTRENGTHS_FOR,
    COPYRIGHT,
    NUMBERED_THEME_LINE,
    section_after_header,
    theme_window,
)

# Paragraph openers used by Gallup's personalized insight generator
INSIGHT_OPENERS = [
    r"Driven by your talents",
    r"By nature",
    r"Instinctively",
    r"Chances are good",
    r"It[’']s very likely",
    r"Because of your strengths",
]

_OPENERS = "|".join(INSIGHT_OPENERS)
_OPENER_START = re.compile(rf"(?:{_OPENERS})", re.IGNORECASE)
# Split before a sentence-case opener anywhere, or before an opener in any case
# (all-caps exports) that starts a line or follows a sentence end
_SPLIT = re.compile(rf"\n\s*\n|(?=(?:{_OPENERS}))|(?<=[\n.!?])\s*(?=[A-Z])(?=(?i:{_OPENERS}))")
_ADDRESSES_READER = re.compile(r"\b(?:you|your|yourself)\b", re.IGNORECASE)
_LAST_SENTENCE_END = re.compile(r"^(.*[.!?])", re.DOTALL)

MAX_INSIGHTS = 5
OPENER_MIN_LENGTH = 30
FALLBACK_MIN_LENGTH = 50
MAX_LENGTH = 800


def _insights_section(window: str, theme_name: str) -> str | None:
    name = name_regex(theme_name)
    header = re.compile(rf"why\s+your\s+{name}\s+is\s+unique", re.IGNORECASE)
    end_patterns = [
        re.compile(rf"how\s+{name}\s+blends", re.IGNORECASE),
        re.compile(rf"apply\s+your\s+{name}", re.IGNORECASE),
        NUMBERED_THEME_LINE,
        CLIFTONSTRENGTHS_FOR,
        COPYRIGHT,
    ]
    return section_after_header(window, header, end_patterns)


def split_insight_paragraphs(section: str) -> list[str]:
    """Split a section into paragraphs at blank lines and at known openers."""
    return [part.strip() for part in _SPLIT.split(section) if part and part.strip()]


def _as_insight(paragraph: str) -> str | None:
    complete = _LAST_SENTENCE_END.match(paragraph)
    if not complete:
        return None
    candidate = clean_text(complete.group(1))

    if _OPENER_START.match(candidate):
        return candidate if in_range(candidate, OPENER_MIN_LENGTH, MAX_LENGTH) else None

    # Any other reader-addressed paragraph that starts like a sentence
    if candidate[:1].isupper() and _ADDRESSES_READER.search(candidate):
        return candidate if in_range(candidate, FALLBACK_MIN_LENGTH, MAX_LENGTH) else None
    return None


def extract_insights(text: str, match: ThemeMatch, window: int | None = None) -> list[str]:
    """Extract up to five personalized insight paragraphs, in document order."""
    after_theme = theme_window(text, match, window or settings.insights_window, include_name=True)
    section = _insights_section(after_theme, match.theme.name)
    if section is None:
        return []

    insights: list[str] = []
    for paragraph in split_insight_paragraphs(section):
        insight = _as_insight(paragraph)
        if insight and insight not in insights:
            insights.append(insight)
        if len(insights) >= MAX_INSIGHTS:
            break
    return insights
