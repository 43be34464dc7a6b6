"""Utility functions."""

from .console import console, err_console
from .logging import setup_logging

__all__ = [
    "console",
    "err_console",
    "setup_logging",
]
