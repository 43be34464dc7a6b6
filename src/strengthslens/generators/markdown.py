"""Markdown summary of a parsed CliftonStrengths report."""

from ..catalog import ThemeCatalog, default_catalog
from ..models import ParsedStrengthsReport, ParsedTheme

REPORT_TITLES = {
    "TOP_5": "Top 5",
    "TOP_10": "Top 10",
    "ALL_34": "All 34",
}


def _domain_name(slug: str, catalog: ThemeCatalog) -> str:
    for domain in catalog.domains:
        if domain.slug == slug:
            return domain.name
    return slug


def _theme_details(theme: ParsedTheme, domain: str) -> list[str]:
    lines = [f"### {theme.rank}. {theme.name} ({domain})\n"]

    if theme.personalized_description:
        lines.append(f"{theme.personalized_description}\n")

    if theme.personalized_insights:
        lines.append("**What Makes You Stand Out:**\n")
        for paragraph in theme.personalized_insights:
            lines.append(f"{paragraph}\n")

    if theme.strength_blends:
        lines.append("**Strength Blends:**")
        for blend in theme.strength_blends:
            lines.append(f"- **{theme.name} + {blend.paired_theme}:** {blend.description}")
        lines.append("")

    if theme.apply_section:
        if theme.apply_section.tagline:
            lines.append(f"> {theme.apply_section.tagline}\n")
        if theme.apply_section.action_items:
            lines.append("**Action Items:**")
            for item in theme.apply_section.action_items:
                lines.append(f"- {item}")
            lines.append("")

    return lines


def render_markdown(report: ParsedStrengthsReport, catalog: ThemeCatalog | None = None) -> str:
    """Render a parsed report as a markdown document."""
    if catalog is None:
        catalog = default_catalog()
    themes = sorted(report.themes, key=lambda t: t.rank)
    top_5 = themes[:5]

    lines = ["# CliftonStrengths Assessment\n"]

    # Header info
    if report.participant_name:
        lines.append(f"**Name:** {report.participant_name}")
    lines.append(f"**Report:** {REPORT_TITLES[report.report_type.value]}")
    lines.append(f"**Confidence:** {round(report.confidence * 100)}%")
    if report.dominant_domain:
        lines.append(f"**Dominant Domain:** {_domain_name(report.dominant_domain, catalog)}")
    lines.append("")

    if not themes:
        lines.append("_No strength themes found._")
        return "\n".join(lines)

    lines.append("## Top 5 Signature Themes\n")
    lines.append("| Rank | Strength | Domain |")
    lines.append("|------|----------|--------|")
    for theme in top_5:
        lines.append(f"| {theme.rank} | **{theme.name}** | {_domain_name(theme.domain, catalog)} |")
    lines.append("")

    # Domain distribution
    lines.append("### Domain Distribution (Top 5)\n")
    domain_themes: dict[str, list[str]] = {}
    for theme in top_5:
        domain_themes.setdefault(theme.domain, []).append(theme.name)
    for domain, names in domain_themes.items():
        lines.append(f"- **{_domain_name(domain, catalog)}:** {', '.join(names)}")
    lines.append("")

    detailed = [
        theme
        for theme in themes
        if theme.personalized_description
        or theme.personalized_insights
        or theme.strength_blends
        or theme.apply_section
    ]
    if detailed:
        lines.append("## Detailed Strength Insights\n")
        for theme in detailed:
            lines.extend(_theme_details(theme, _domain_name(theme.domain, catalog)))

    # Supporting themes (6-10)
    if len(themes) > 5:
        lines.append("## Supporting Strengths (6-10)\n")
        lines.append("| Rank | Strength | Domain |")
        lines.append("|------|----------|--------|")
        for theme in themes[5:10]:
            lines.append(f"| {theme.rank} | {theme.name} | {_domain_name(theme.domain, catalog)} |")
        lines.append("")

    # Full ranking
    if len(themes) > 10:
        names = [theme.name for theme in themes]
        lines.append("## Complete Strength Ranking\n")

        lines.append("### Strengthen (1-10)")
        lines.append(", ".join(f"**{n}**" if i < 5 else n for i, n in enumerate(names[:10])))
        lines.append("")

        lines.append("### Navigate (11-23)")
        lines.append(", ".join(names[10:23]))
        lines.append("")

        if len(names) > 23:
            lines.append("### Lesser Themes (24-34)")
            lines.append(", ".join(names[23:]))
            lines.append("")

    return "\n".join(lines)
