"""Participant name extraction from report headers."""

import re

from ..catalog import ThemeCatalog

_NAME = r"([A-Z][a-z]+ [A-Z][a-z]+)"

# Common report header phrasings, most specific first
NAME_PATTERNS = [
    # "Your Signature Themes\nJohn Doe"
    re.compile(
        rf"Your (?:Signature|Top) (?:Themes?|Strengths?)\s*[\n\r]+{_NAME}",
        re.IGNORECASE,
    ),
    # "Signature Themes Report\nJohn Doe"
    re.compile(
        rf"(?:Signature|Top) (?:Themes?|Strengths?) Report\s*[\n\r]+{_NAME}",
        re.IGNORECASE,
    ),
    # "CliftonStrengths 34\nJohn Doe"
    re.compile(rf"CliftonStrengths\s*(?:34|for)?\s*[\n\r]+{_NAME}", re.IGNORECASE),
    # Name alone on a line, e.g. the first line of the report
    re.compile(rf"^{_NAME}\s*[\n\r]", re.MULTILINE),
    re.compile(rf"Prepared for[:\s]+{_NAME}", re.IGNORECASE),
    re.compile(rf"Report (?:for|to)[:\s]+{_NAME}", re.IGNORECASE),
]

MIN_LENGTH = 4
MAX_LENGTH = 50


def _is_catalog_term(name: str, catalog: ThemeCatalog) -> bool:
    if catalog.find(name) is not None:
        return True
    return any(name.lower() == domain.name.lower() for domain in catalog.domains)


def extract_participant_name(text: str, catalog: ThemeCatalog) -> str | None:
    """Return the first header match that looks like a person's name, or None.

    Captures that are theme or domain names ("Relationship Building") are
    skipped in favor of the next pattern.
    """
    for pattern in NAME_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        name = match.group(1).strip()
        if not _is_catalog_term(name, catalog) and MIN_LENGTH <= len(name) < MAX_LENGTH:
            return name
    return None
