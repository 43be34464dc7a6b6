"""CliftonStrengths theme catalog.

The 34 themes and the 4 domains they belong to. The catalog is immutable
reference data: build it once (or use ``default_catalog()``) and pass it to
the extraction functions.
"""

import re
from dataclasses import dataclass
from functools import cache

# CliftonStrengths domains: (display name, slug) -> themes
DOMAINS: dict[tuple[str, str], list[str]] = {
    ("Executing", "executing"): [
        "Achiever",
        "Arranger",
        "Belief",
        "Consistency",
        "Deliberative",
        "Discipline",
        "Focus",
        "Responsibility",
        "Restorative",
    ],
    ("Influencing", "influencing"): [
        "Activator",
        "Command",
        "Communication",
        "Competition",
        "Maximizer",
        "Self-Assurance",
        "Significance",
        "Woo",
    ],
    ("Relationship Building", "relationship"): [
        "Adaptability",
        "Connectedness",
        "Developer",
        "Empathy",
        "Harmony",
        "Includer",
        "Individualization",
        "Positivity",
        "Relator",
    ],
    ("Strategic Thinking", "strategic"): [
        "Analytical",
        "Context",
        "Futuristic",
        "Ideation",
        "Input",
        "Intellection",
        "Learner",
        "Strategic",
    ],
}

_SEPARATORS = re.compile(r"[\s-]+")
_TRADEMARKS = re.compile(r"[®™]")
_WHITESPACE = re.compile(r"\s+")


def normalize_theme_name(name: str) -> str:
    """Normalize a theme name as it appears in PDF text for catalog lookup.

    Strips trademark glyphs, collapses whitespace, turns hyphens into spaces
    and lowercases, so "SELF-ASSURANCE®" and "Self Assurance" compare equal.
    """
    name = _TRADEMARKS.sub("", name)
    name = name.replace("-", " ")
    name = _WHITESPACE.sub(" ", name)
    return name.strip().lower()


def name_regex(name: str) -> str:
    """Regex matching a theme name literally, with hyphens and spaces interchangeable.

    PDF exports spell "Self-Assurance" as "SELF-ASSURANCE", "Self Assurance"
    or break it across lines.
    """
    return r"[\s-]+".join(re.escape(part) for part in _SEPARATORS.split(name.strip()))


@dataclass(frozen=True)
class Domain:
    """One of the four CliftonStrengths domains."""

    name: str
    slug: str


@dataclass(frozen=True)
class Theme:
    """A catalog theme."""

    name: str
    slug: str
    domain: Domain


class ThemeCatalog:
    """Read-only lookup over the CliftonStrengths themes.

    Lookups are many-to-one: the normalized name, the lowercase display name
    and the slug all resolve to the same ``Theme``.
    """

    def __init__(self, themes: list[Theme]) -> None:
        self._themes = tuple(themes)
        self._by_slug = {theme.slug: theme for theme in self._themes}
        lookup: dict[str, Theme] = {}
        for theme in self._themes:
            lookup[normalize_theme_name(theme.name)] = theme
            lookup[theme.name.lower()] = theme
            lookup[theme.slug] = theme
        self._lookup = lookup
        domains: dict[str, Domain] = {}
        for theme in self._themes:
            domains.setdefault(theme.domain.slug, theme.domain)
        self._domains = tuple(domains.values())
        self._pattern = "|".join(name_regex(theme.name) for theme in self._themes)

    @classmethod
    def from_domains(cls, domains: dict[tuple[str, str], list[str]]) -> "ThemeCatalog":
        """Build a catalog from a ``{(domain name, domain slug): [theme names]}`` table."""
        themes = []
        for (domain_name, domain_slug), names in domains.items():
            domain = Domain(name=domain_name, slug=domain_slug)
            for name in names:
                themes.append(Theme(name=name, slug=slugify(name), domain=domain))
        return cls(themes)

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self):
        return iter(self._themes)

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.find(text) is not None

    @property
    def themes(self) -> tuple[Theme, ...]:
        return self._themes

    @property
    def names(self) -> list[str]:
        return [theme.name for theme in self._themes]

    @property
    def domains(self) -> tuple[Domain, ...]:
        return self._domains

    def find(self, text: str) -> Theme | None:
        """Resolve free text (e.g. "STRATEGIC ®") to a catalog theme."""
        return self._lookup.get(normalize_theme_name(text))

    def get(self, slug: str) -> Theme | None:
        return self._by_slug.get(slug)

    def themes_in_domain(self, domain_slug: str) -> list[Theme]:
        return [theme for theme in self._themes if theme.domain.slug == domain_slug]

    def theme_pattern(self) -> str:
        """Regex alternation matching any theme name (see ``name_regex``)."""
        return self._pattern


def slugify(name: str) -> str:
    """Stable identifier for a theme name: "Self-Assurance" -> "self-assurance"."""
    return _WHITESPACE.sub("-", normalize_theme_name(name).strip())


@cache
def default_catalog() -> ThemeCatalog:
    """The standard 34-theme catalog, built once per process."""
    return ThemeCatalog.from_domains(DOMAINS)
