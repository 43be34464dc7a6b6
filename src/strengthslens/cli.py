"""StrengthsLens CLI - parse CliftonStrengths reports."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .catalog import default_catalog
from .services import ParseOutcome, ReportService, StrengthsLensError
from .utils.console import console, err_console
from .utils.logging import setup_logging
from .validation.models import ParseFileInput, ParseTextInput

logger = logging.getLogger(__name__)


def _validate_input(model_class: type, **kwargs: Any) -> Any:
    """Validate input using Pydantic model, exit on validation error.

    Raises:
        typer.Exit: If validation fails (exits with code 1)
    """
    try:
        return model_class(**kwargs)
    except PydanticValidationError as e:
        console.print(f"[red]Validation error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)


def _print_panel(message: str, style: str = "blue") -> None:
    """Print a styled panel message."""
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


app = typer.Typer(
    name="strengthslens",
    help="Extract structured data from CliftonStrengths PDF reports",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]StrengthsLens[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show parser debug logging"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write DEBUG logs to this file"),
    ] = None,
) -> None:
    """StrengthsLens - know your CliftonStrengths through your data."""
    setup_logging(verbose=verbose, log_file=log_file)


def _print_summary(outcome: ParseOutcome) -> None:
    report = outcome.report

    table = Table(title="Themes")
    table.add_column("Rank", justify="right")
    table.add_column("Theme", style="bold")
    table.add_column("Domain")
    table.add_column("Description", justify="center")
    table.add_column("Insights", justify="right")
    table.add_column("Blends", justify="right")
    table.add_column("Apply", justify="center")
    for theme in report.themes:
        table.add_row(
            str(theme.rank),
            theme.name,
            theme.domain,
            "✓" if theme.personalized_description else "",
            str(len(theme.personalized_insights or ())),
            str(len(theme.strength_blends or ())),
            "✓" if theme.apply_section else "",
        )

    console.print(f"Participant: {report.participant_name or '[yellow]unknown[/yellow]'}")
    console.print(f"Report type: {report.report_type.value}")
    console.print(f"Confidence: {round(report.confidence * 100)}%")
    if report.themes:
        console.print(table)


def _emit(outcome: ParseOutcome, as_json: bool, as_markdown: bool, output: Path | None) -> None:
    """Print or write the parse result, then exit 1 if validation failed."""
    if as_json:
        payload = {
            "report": outcome.report.to_dict(),
            "validation": outcome.validation.to_dict(),
        }
        if outcome.diagnostics:
            payload["diagnostics"] = outcome.diagnostics.to_dict()
        content = json.dumps(payload, indent=2, ensure_ascii=False)
    elif as_markdown:
        from .generators.markdown import render_markdown

        content = render_markdown(outcome.report)
    else:
        content = None

    if content is not None and output:
        output.write_text(content)
        console.print(f"[green]Saved to:[/green] {output}")
    elif content is not None:
        # Plain print keeps JSON/markdown free of rich markup
        print(content)
    else:
        _print_summary(outcome)

    for warning in outcome.validation.warnings:
        err_console.print(f"[yellow]⚠ {warning}[/yellow]")
    for error in outcome.validation.errors:
        err_console.print(f"[red]✗ {error}[/red]")
    if outcome.diagnostics:
        err_console.print(f"[red]{outcome.diagnostics.message}[/red]")

    if not outcome.success:
        raise typer.Exit(code=1)


@app.command("parse")
def parse_command(
    pdf_path: Annotated[Path, typer.Argument(help="Gallup CliftonStrengths PDF report")],
    as_json: Annotated[bool, typer.Option("--json", help="Output the report as JSON")] = False,
    as_markdown: Annotated[
        bool, typer.Option("--markdown", help="Output a markdown summary")
    ] = False,
    diagnostics: Annotated[
        bool, typer.Option("--diagnostics", help="Include the full extracted text")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write output to a file")
    ] = None,
) -> None:
    """Parse a CliftonStrengths PDF report."""
    _validate_input(ParseFileInput, pdf_path=pdf_path)

    if not (as_json or as_markdown):
        _print_panel(f"Parsing {pdf_path.name}...")

    try:
        outcome = ReportService().parse_file(pdf_path, include_diagnostics=diagnostics or None)
    except StrengthsLensError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    _emit(outcome, as_json, as_markdown, output)


@app.command("parse-text")
def parse_text_command(
    text_path: Annotated[Path, typer.Argument(help="Plain-text export of a report")],
    name: Annotated[
        str | None, typer.Option("--name", "-n", help="Participant name to use")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Output the report as JSON")] = False,
    as_markdown: Annotated[
        bool, typer.Option("--markdown", help="Output a markdown summary")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write output to a file")
    ] = None,
) -> None:
    """Parse report text that was already extracted from a PDF."""
    validated = _validate_input(ParseTextInput, text_path=text_path, participant_name=name)

    text = validated.text_path.read_text(encoding="utf-8", errors="replace")
    outcome = ReportService().parse_text(text, validated.participant_name)
    _emit(outcome, as_json, as_markdown, output)


@app.command("themes")
def themes_command(
    domain: Annotated[
        str | None,
        typer.Option("--domain", "-d", help="Only show one domain (e.g. executing)"),
    ] = None,
) -> None:
    """List the CliftonStrengths themes and their domains."""
    catalog = default_catalog()
    themes = catalog.themes_in_domain(domain) if domain else list(catalog.themes)
    if not themes:
        known = ", ".join(d.slug for d in catalog.domains)
        console.print(f"[red]Unknown domain: {domain}. Choose one of: {known}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="CliftonStrengths Themes")
    table.add_column("Theme", style="bold")
    table.add_column("Slug")
    table.add_column("Domain")
    for theme in themes:
        table.add_row(theme.name, theme.slug, theme.domain.name)
    console.print(table)


if __name__ == "__main__":
    app()
