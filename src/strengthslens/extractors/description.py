"""Personalized theme description extraction."""

import re

from ..catalog import ThemeCatalog
from ..config import settings
from .cleaning import clean_text, in_range
from .locator import ThemeMatch
from .sections import (
    ANY_APPLY_HEADER,
    ANY_BLENDS_HEADER,
    ANY_UNIQUE_HEADER,
    earliest_match,
    next_theme_boundary,
    theme_window,
)

# Personalized prose in Gallup reports addresses the reader: "You ...", "Your ..."
PERSONALIZED_START = re.compile(r"[\n\r]+\s*(You(?!r\s+Signature\s+Themes))")
# Up to five sentences
SENTENCES = re.compile(r"[^.!?]*[.!?](?:\s*[^.!?]*[.!?]){0,4}")
PARAGRAPH_END = [
    re.compile(r"\n[ \t]*\r?\n"),
    ANY_UNIQUE_HEADER,
    ANY_BLENDS_HEADER,
    ANY_APPLY_HEADER,
]

TRAILING_NUMBERED_THEME = re.compile(r"\s*\d+\.\s*[A-Z][a-z]+\s*®?\s*$")
TRAILING_CLIFTONSTRENGTHS = re.compile(r"\s*CliftonStrengths\s*®?.*$", re.IGNORECASE | re.DOTALL)

MIN_LENGTH = 30
MAX_LENGTH = 600


def _strip_leaked_tail(description: str, catalog: ThemeCatalog) -> str:
    """Drop trailing theme headings or footer text the paragraph match swallowed."""
    description = TRAILING_NUMBERED_THEME.sub("", description).strip()

    for name in catalog.names:
        tail = re.compile(rf"\s*\d*\.?\s*{re.escape(name)}\s*®?\s*$", re.IGNORECASE)
        description = tail.sub("", description).strip()

    domain_names = "|".join(re.escape(domain.name) for domain in catalog.domains)
    domain_footer = re.compile(
        rf"\s*(?:{domain_names})\s+themes\s+help.*$",
        re.IGNORECASE | re.DOTALL,
    )
    description = domain_footer.sub("", description).strip()

    return TRAILING_CLIFTONSTRENGTHS.sub("", description).strip()


def extract_description(
    text: str,
    match: ThemeMatch,
    catalog: ThemeCatalog,
    window: int | None = None,
) -> str | None:
    """Find the personalized "You ..." paragraph that follows a theme heading.

    Returns None when the theme has no personalized paragraph, which is normal
    for report tiers without personalization.
    """
    after_theme = theme_window(text, match, window or settings.description_window)
    relevant = after_theme[: next_theme_boundary(after_theme, catalog)]

    start = PERSONALIZED_START.search(relevant)
    if not start:
        return None

    paragraph = relevant[start.start(1) :]
    paragraph = paragraph[: earliest_match(paragraph, PARAGRAPH_END, len(paragraph))]
    sentences = SENTENCES.match(paragraph)
    if not sentences:
        return None

    description = clean_text(_strip_leaked_tail(sentences.group(0).strip(), catalog))
    if in_range(description, MIN_LENGTH, MAX_LENGTH):
        return description
    return None
