"""Section windowing for per-theme extraction.

Every field extractor works on a bounded slice of the document that starts
at the theme's first mention. These helpers cut that slice short at the
next theme heading or at page-footer boilerplate, erring on the side of
capturing too little rather than bleeding into another theme's prose.
"""

import re
from collections.abc import Iterable

from ..catalog import ThemeCatalog
from .locator import ThemeMatch

# "3. Futuristic ®" on its own line: a new theme section starts
NUMBERED_THEME_LINE = re.compile(r"\n\s*\d+\.\s*[A-Z][a-z]+(?:-[A-Z][a-z]+)?\s*®?\s*\n")

# Generic section headers that belong to whichever theme comes next
ANY_UNIQUE_HEADER = re.compile(r"why\s+your\s+[\w-]+\s+is\s+unique", re.IGNORECASE)
ANY_BLENDS_HEADER = re.compile(r"how\s+[\w-]+\s+blends", re.IGNORECASE)
ANY_APPLY_HEADER = re.compile(r"apply\s+your\s+[\w-]+\s+to\s+succeed", re.IGNORECASE)
CLIFTONSTRENGTHS_FOR = re.compile(r"CliftonStrengths\s*®?\s*for", re.IGNORECASE)
COPYRIGHT = re.compile(r"Copyright\s+", re.IGNORECASE)

# Page footer / legend boilerplate that follows theme descriptions
STATIC_FOOTER_PATTERNS = [
    re.compile(r"\n\s*CliftonStrengths\s*®?\s*(?:Top|for|34|Results)", re.IGNORECASE),
    re.compile(r"\n\s*Copyright\s+", re.IGNORECASE),
    re.compile(r"\n\s*Gallup\s*,?\s*Inc", re.IGNORECASE),
    re.compile(r"\n\s*This\s+report\s+presents", re.IGNORECASE),
    re.compile(r"\n\s*All\s+\d+\s+of\s+your\s+CliftonStrengths", re.IGNORECASE),
    re.compile(r"\n\s*Learn\s+more\s+about", re.IGNORECASE),
]


def theme_window(text: str, match: ThemeMatch, limit: int, include_name: bool = False) -> str:
    """Slice of ``text`` following a theme's first mention, at most ``limit`` chars."""
    start = match.offset if include_name else match.end
    return text[start : start + limit]


def footer_patterns(catalog: ThemeCatalog) -> list[re.Pattern[str]]:
    """Footer markers, including "<Domain> themes help ..." legends built from the catalog."""
    domain_patterns = [
        re.compile(rf"\n\s*{re.escape(domain.name)}\s+themes\s+help", re.IGNORECASE)
        for domain in catalog.domains
    ]
    return domain_patterns + STATIC_FOOTER_PATTERNS


def _first_resolving(
    pattern: re.Pattern[str], window: str, catalog: ThemeCatalog, group: int = 1
) -> int | None:
    for match in pattern.finditer(window):
        if catalog.find(match.group(group)) is not None:
            return match.start()
    return None


def next_theme_boundary(window: str, catalog: ThemeCatalog) -> int:
    """Offset in ``window`` where the current theme's content ends.

    The earliest of: a numbered "N. Theme" entry, a theme name alone on its
    line, or a footer marker. Returns ``len(window)`` when nothing matches.
    """
    names = catalog.theme_pattern()
    candidates = [len(window)]

    numbered = re.compile(rf"\n\s*\d+\.\s*({names})\b", re.IGNORECASE)
    standalone = re.compile(rf"\n[ \t]*({names})[ \t]*[®™]?[ \t]*(?=\r?\n)", re.IGNORECASE)
    for pattern in (numbered, standalone):
        position = _first_resolving(pattern, window, catalog)
        if position is not None:
            candidates.append(position)

    for pattern in footer_patterns(catalog):
        match = pattern.search(window)
        if match:
            candidates.append(match.start())

    return min(candidates)


def earliest_match(text: str, patterns: Iterable[re.Pattern[str]], default: int) -> int:
    """Start of the earliest match of any pattern, or ``default``."""
    end = default
    for pattern in patterns:
        match = pattern.search(text)
        if match and match.start() < end:
            end = match.start()
    return end


def section_after_header(
    window: str,
    header: re.Pattern[str],
    end_patterns: Iterable[re.Pattern[str]],
    cap: int | None = None,
) -> str | None:
    """Text between ``header`` and the first end marker (or ``cap`` chars).

    Returns None when the header is absent.
    """
    header_match = header.search(window)
    if not header_match:
        return None

    after_header = window[header_match.end() :]
    limit = len(after_header) if cap is None else min(len(after_header), cap)
    return after_header[: earliest_match(after_header, end_patterns, limit)]
