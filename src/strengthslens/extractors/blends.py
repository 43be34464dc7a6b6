"""Strength blends from "How <Theme> Blends With Your Other Top Five"."""

import re

from ..catalog import ThemeCatalog, name_regex
from ..config import settings
from ..models import StrengthBlend
from .cleaning import clean_text, in_range
from .locator import ThemeMatch
from .sections import (
    ANY_UNIQUE_HEADER,
    CLIFTONSTRENGTHS_FOR,
    NUMBERED_THEME_LINE,
    section_after_header,
    theme_window,
)

MAX_BLENDS = 4
MIN_LENGTH = 20
MAX_LENGTH = 600


def _blends_section(window: str, theme_name: str, cap: int) -> str | None:
    name = name_regex(theme_name)
    header = re.compile(
        rf"how\s+{name}\s+blends\s+with\s+your\s+other\s+top\s+five",
        re.IGNORECASE,
    )
    end_patterns = [
        re.compile(rf"apply\s+your\s+{name}", re.IGNORECASE),
        NUMBERED_THEME_LINE,
        CLIFTONSTRENGTHS_FOR,
        ANY_UNIQUE_HEADER,
    ]
    return section_after_header(window, header, end_patterns, cap=cap)


def blend_regex(catalog: ThemeCatalog) -> re.Pattern[str]:
    """``ThemeA + ThemeB <prose>``, prose ending where the next pairing begins."""
    names = catalog.theme_pattern()
    return re.compile(
        rf"\b({names})\b\s*\+\s*\b({names})\b\s*([^+]+?)(?=\b(?:{names})\b\s*\+|$)",
        re.IGNORECASE,
    )


def extract_blends(
    text: str,
    match: ThemeMatch,
    catalog: ThemeCatalog,
    window: int | None = None,
    cap: int | None = None,
) -> list[StrengthBlend]:
    """Extract up to four pairings of this theme with the participant's other top five.

    A pairing whose two sides do not include the current theme is skipped,
    as is one whose other side is not in the catalog.
    """
    owner = match.theme
    after_theme = theme_window(text, match, window or settings.section_window, include_name=True)
    section = _blends_section(after_theme, owner.name, cap or settings.blends_section_cap)
    if section is None:
        return []

    blends: list[StrengthBlend] = []
    for pairing in blend_regex(catalog).finditer(section):
        first = catalog.find(pairing.group(1))
        second = catalog.find(pairing.group(2))
        if first is not None and first.slug == owner.slug:
            paired = second
        elif second is not None and second.slug == owner.slug:
            paired = first
        else:
            continue

        description = clean_text(pairing.group(3))
        if paired is None or paired.slug == owner.slug:
            continue
        if not in_range(description, MIN_LENGTH, MAX_LENGTH):
            continue

        blends.append(
            StrengthBlend(
                paired_theme=paired.name,
                paired_theme_slug=paired.slug,
                description=description,
            )
        )
        if len(blends) >= MAX_BLENDS:
            break

    return blends
