"""Shared rich consoles for CLI output."""

from rich.console import Console

console = Console()

# Validation messages go to stderr so JSON/markdown on stdout stays parseable
err_console = Console(stderr=True)
