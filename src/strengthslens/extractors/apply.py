"""Tagline and action items from "Apply Your <Theme> to Succeed"."""

import re

from ..catalog import name_regex
from ..config import settings
from ..models import ApplySection
from .cleaning import clean_text, in_range
from .locator import ThemeMatch
from .sections import (
    ANY_BLENDS_HEADER,
    ANY_UNIQUE_HEADER,
    CLIFTONSTRENGTHS_FOR,
    COPYRIGHT,
    NUMBERED_THEME_LINE,
    section_after_header,
    theme_window,
)

# Tried in order; the first capture of acceptable length is the tagline
TAGLINE_PATTERNS = [
    re.compile(r'"([^"]+)"'),
    re.compile(r"(?<!\w)'([^'\n]+)'(?!\w)"),
    re.compile(r"[“”]([^“”]+)[“”]"),
    re.compile(r"\n\s*\*([^*]+)\*\s*\n"),
    re.compile(r"\n\s*([A-Z][^.!?]{20,100}[.!?])\s*\n"),
]

# Bullet, numbered and dash-prefixed items, one family at a time
ACTION_ITEM_PATTERNS = [
    re.compile(r"[•●○►]\s*([^•●○►\n]+)"),
    re.compile(r"(?:^|\n)[ \t]*\d+[.)]\s*([^0-9\n][^\n]{30,300})"),
    re.compile(r"(?:^|\n)[ \t]*[-–—]\s*([A-Z][^\n]{30,300})"),
]

ACTION_VERBS = [
    "Look for",
    "Seek out",
    "Consider",
    "Try",
    "Focus on",
    "Make sure",
    "Partner with",
    "Use your",
    "Apply your",
    "Leverage your",
    "Share your",
]
ACTION_VERB_SENTENCE = re.compile(
    r"\n\s*((?:" + "|".join(ACTION_VERBS) + r")\b[^.!?]*[.!?])",
    re.IGNORECASE,
)

MAX_ACTION_ITEMS = 2
TAGLINE_MIN_LENGTH = 10
TAGLINE_MAX_LENGTH = 200
ITEM_MIN_LENGTH = 30
ITEM_MAX_LENGTH = 400


def _apply_section(window: str, theme_name: str, cap: int) -> str | None:
    name = name_regex(theme_name)
    header = re.compile(rf"apply\s+your\s+{name}\s+to\s+succeed", re.IGNORECASE)
    end_patterns = [
        NUMBERED_THEME_LINE,
        CLIFTONSTRENGTHS_FOR,
        ANY_UNIQUE_HEADER,
        ANY_BLENDS_HEADER,
        COPYRIGHT,
    ]
    return section_after_header(window, header, end_patterns, cap=cap)


def extract_tagline(section: str) -> str:
    for pattern in TAGLINE_PATTERNS:
        match = pattern.search(section)
        if match:
            tagline = clean_text(match.group(1))
            if in_range(tagline, TAGLINE_MIN_LENGTH, TAGLINE_MAX_LENGTH):
                return tagline
    return ""


def _collect(pattern: re.Pattern[str], section: str, items: list[str]) -> None:
    for match in pattern.finditer(section):
        item = clean_text(match.group(1))
        if in_range(item, ITEM_MIN_LENGTH, ITEM_MAX_LENGTH) and item not in items:
            items.append(item)


def extract_action_items(section: str) -> list[str]:
    """Bulleted, numbered or dashed items; action-verb sentences as a fallback."""
    items: list[str] = []
    for pattern in ACTION_ITEM_PATTERNS:
        _collect(pattern, section, items)
        if len(items) >= MAX_ACTION_ITEMS:
            break

    if len(items) < MAX_ACTION_ITEMS:
        _collect(ACTION_VERB_SENTENCE, section, items)

    return items[:MAX_ACTION_ITEMS]


def extract_apply_section(
    text: str,
    match: ThemeMatch,
    window: int | None = None,
    cap: int | None = None,
) -> ApplySection | None:
    """Extract the apply section, or None when it has neither tagline nor items."""
    after_theme = theme_window(text, match, window or settings.section_window, include_name=True)
    section = _apply_section(after_theme, match.theme.name, cap or settings.apply_section_cap)
    if section is None:
        return None

    tagline = extract_tagline(section)
    action_items = extract_action_items(section)
    if not tagline and not action_items:
        return None
    return ApplySection(tagline=tagline, action_items=tuple(action_items))
