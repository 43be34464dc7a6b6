"""StrengthsLens exceptions.

Heuristic extraction misses are never exceptions; only failures of the
PDF-decoding collaborator propagate to callers.
"""


class StrengthsLensError(Exception):
    """Base exception for StrengthsLens errors."""

    pass


class TextExtractionError(StrengthsLensError):
    """Raised when a PDF cannot be converted to text."""

    pass
