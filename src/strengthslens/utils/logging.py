"""Logging setup for the StrengthsLens CLI."""

import logging
import sys
from pathlib import Path

from ..config import LogLevel, settings

ROOT_LOGGER = "strengthslens"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: LogLevel | None = None,
) -> logging.Logger:
    """Attach handlers to the ``strengthslens`` logger.

    Module loggers (``logging.getLogger(__name__)``) propagate here. The console
    handler writes to stderr so JSON and markdown on stdout stay clean.

    Args:
        verbose: Log parser diagnostics at DEBUG on the console
        log_file: Optional file that receives every record at DEBUG
        level: Console level, defaults to ``settings.log_level``

    Returns:
        The configured package logger
    """
    console_level = "DEBUG" if verbose else (level or settings.log_level)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    # The file handler needs every record; the console handler filters its own
    logger.setLevel(logging.DEBUG if log_file else getattr(logging, console_level))
    return logger
