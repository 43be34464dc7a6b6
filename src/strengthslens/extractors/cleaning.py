"""Text cleanup shared by the field extractors."""

import re

_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Collapse PDF line wrapping and runs of whitespace into single spaces."""
    return _WHITESPACE.sub(" ", text).strip()


def in_range(text: str, low: int, high: int) -> bool:
    """Length check used to reject fragments and runaway captures."""
    return low <= len(text) < high
