"""PDF to plain text conversion.

Uses poppler's ``pdftotext`` CLI, feeding the PDF on stdin so callers can
hand over in-memory upload buffers.
"""

import logging
import subprocess
from typing import Protocol

from ..config import settings
from ..services.exceptions import TextExtractionError

logger = logging.getLogger(__name__)


class TextExtractor(Protocol):
    """Anything that can turn PDF bytes into plain text."""

    def extract(self, data: bytes) -> str: ...


class PdftotextExtractor:
    """Extract text from PDF bytes with poppler-utils ``pdftotext``."""

    cli_install_hint = "Install poppler-utils (e.g. apt install poppler-utils)."

    def __init__(
        self,
        command: str | None = None,
        timeout: int | None = None,
        layout: bool | None = None,
    ) -> None:
        self.command = command or settings.pdftotext_command
        self.timeout = timeout or settings.pdftotext_timeout
        self.layout = settings.pdftotext_layout if layout is None else layout

    def _build_args(self) -> list[str]:
        args = [self.command]
        if self.layout:
            args.append("-layout")
        # Read PDF from stdin, write UTF-8 text to stdout
        args.extend(["-enc", "UTF-8", "-", "-"])
        return args

    def extract(self, data: bytes) -> str:
        """Convert PDF bytes to text.

        Raises:
            TextExtractionError: If pdftotext is missing, fails, times out,
                or produces no output at all
        """
        if not data:
            raise TextExtractionError("Empty PDF buffer")

        try:
            result = subprocess.run(
                self._build_args(),
                input=data,
                capture_output=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            logger.error("%s not found. %s", self.command, self.cli_install_hint)
            raise TextExtractionError(f"{self.command} not found. {self.cli_install_hint}") from e
        except subprocess.TimeoutExpired as e:
            logger.error("%s timed out after %d seconds", self.command, self.timeout)
            raise TextExtractionError(f"{self.command} timed out") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            logger.warning("%s failed: %s", self.command, stderr)
            raise TextExtractionError(f"{self.command} failed: {stderr or 'unknown error'}")

        # Image-only PDFs still yield page breaks; those reach the validator
        text = result.stdout.decode("utf-8", errors="replace")
        if not text:
            raise TextExtractionError("No text could be extracted from the PDF")
        return text
