"""Parsed CliftonStrengths report data."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ReportType(str, Enum):
    """Report tier, derived from how many themes a document contains."""

    TOP_5 = "TOP_5"
    TOP_10 = "TOP_10"
    ALL_34 = "ALL_34"


@dataclass(frozen=True)
class StrengthBlend:
    """How a theme pairs with another of the participant's top five."""

    paired_theme: str
    paired_theme_slug: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "pairedTheme": self.paired_theme,
            "pairedThemeSlug": self.paired_theme_slug,
            "description": self.description,
        }


@dataclass(frozen=True)
class ApplySection:
    """Tagline and action items from "Apply Your <Theme> to Succeed"."""

    tagline: str = ""
    action_items: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"tagline": self.tagline, "actionItems": list(self.action_items)}


@dataclass(frozen=True)
class ParsedTheme:
    """One theme as found in a specific document."""

    name: str
    slug: str
    domain: str
    rank: int
    personalized_description: str | None = None
    personalized_insights: tuple[str, ...] | None = None
    strength_blends: tuple[StrengthBlend, ...] | None = None
    apply_section: ApplySection | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "slug": self.slug,
            "domain": self.domain,
            "rank": self.rank,
        }
        if self.personalized_description is not None:
            data["personalizedDescription"] = self.personalized_description
        if self.personalized_insights is not None:
            data["personalizedInsights"] = list(self.personalized_insights)
        if self.strength_blends is not None:
            data["strengthBlends"] = [blend.to_dict() for blend in self.strength_blends]
        if self.apply_section is not None:
            data["applySection"] = self.apply_section.to_dict()
        return data


@dataclass(frozen=True)
class ParsedStrengthsReport:
    """Structured result of parsing a CliftonStrengths report."""

    participant_name: str | None
    themes: tuple[ParsedTheme, ...]
    report_type: ReportType
    confidence: float
    raw_text: str | None = None

    def top_themes(self, count: int = 5) -> tuple[ParsedTheme, ...]:
        return tuple(sorted(self.themes, key=lambda t: t.rank)[:count])

    @property
    def dominant_domain(self) -> str | None:
        """Most frequent domain slug among the top five themes."""
        top = self.top_themes(5)
        if not top:
            return None
        domain_counts: dict[str, int] = {}
        for theme in top:
            domain_counts[theme.domain] = domain_counts.get(theme.domain, 0) + 1
        return max(domain_counts, key=lambda d: domain_counts[d])

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "participantName": self.participant_name,
            "themes": [theme.to_dict() for theme in self.themes],
            "reportType": self.report_type.value,
            "confidence": self.confidence,
        }
        if self.raw_text is not None:
            data["rawText"] = self.raw_text
        return data


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the structural post-check of a parsed report."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}
