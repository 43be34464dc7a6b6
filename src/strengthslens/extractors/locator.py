"""Locate CliftonStrengths themes in report text."""

import re
from dataclasses import dataclass

from ..catalog import Theme, ThemeCatalog


@dataclass(frozen=True)
class ThemeMatch:
    """First appearance of a theme in a document."""

    theme: Theme
    offset: int
    text: str

    @property
    def end(self) -> int:
        return self.offset + len(self.text)


def theme_regex(catalog: ThemeCatalog) -> re.Pattern[str]:
    """Word-bounded, case-insensitive alternation over every catalog name."""
    return re.compile(rf"\b({catalog.theme_pattern()})\b", re.IGNORECASE)


def locate_themes(text: str, catalog: ThemeCatalog) -> list[ThemeMatch]:
    """Find each theme's first occurrence, in document order.

    A theme name usually recurs in body text (other themes' blend sections,
    footers), so only the first hit counts; offset order is rank order.
    """
    matches: list[ThemeMatch] = []
    seen: set[str] = set()

    for match in theme_regex(catalog).finditer(text):
        theme = catalog.find(match.group(1))
        if theme is None or theme.slug in seen:
            continue
        seen.add(theme.slug)
        matches.append(ThemeMatch(theme=theme, offset=match.start(1), text=match.group(1)))

    return matches
