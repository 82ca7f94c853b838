"""
Text sources: run the PDF-to-text converter and stream its output line by line.
"""
import shlex
import subprocess
from pathlib import Path
from typing import Iterator, List, Optional
import logging

import pdfplumber

from .errors import ConverterFailure, IOFailure

logger = logging.getLogger(__name__)


class TextConverter:
    """Runs an external converter on a statement and streams its standard output."""

    def __init__(self, pdf_path: Path, command: List[str]):
        self.pdf_path = pdf_path
        self.argv = [part.replace("{path}", str(pdf_path)) for part in command]
        self._proc: Optional[subprocess.Popen] = None

    def lines(self) -> Iterator[str]:
        """
        Yield converter output lines, then check the exit status.

        The converter's standard error is passed through unchanged.

        Raises:
            IOFailure: If the statement is unreadable or the converter cannot start
            ConverterFailure: If the converter exits non-zero
        """
        if not self.pdf_path.is_file():
            raise IOFailure(f"cannot open {self.pdf_path}")

        logger.debug(f"Running converter: {shlex.join(self.argv)}")
        try:
            self._proc = subprocess.Popen(
                self.argv,
                stdout=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise IOFailure(f"starting {self.argv[0]}: {e}") from e

        for line in self._proc.stdout:
            yield line

        self._proc.stdout.close()
        returncode = self._proc.wait()
        self._proc = None
        if returncode != 0:
            raise ConverterFailure(shlex.join(self.argv), returncode)

    def close(self):
        """Stop a converter that is still running because extraction bailed out early."""
        if self._proc is None:
            return
        if self._proc.poll() is None:
            self._proc.kill()
        self._proc.stdout.close()
        self._proc.wait()
        self._proc = None


class PlumberTextSource:
    """Reads layout-preserving text with pdfplumber, one page at a time."""

    def __init__(self, pdf_path: Path):
        self.pdf_path = pdf_path
        self._pdf = None

    def lines(self) -> Iterator[str]:
        try:
            self._pdf = pdfplumber.open(self.pdf_path)
        except Exception as e:
            raise IOFailure(f"cannot open {self.pdf_path}: {e}") from e

        logger.info(f"Loaded PDF with {len(self._pdf.pages)} pages")
        for page in self._pdf.pages:
            text = page.extract_text(layout=True) or ""
            for line in text.splitlines():
                yield line

    def close(self):
        if self._pdf:
            self._pdf.close()
            self._pdf = None


def open_text_source(pdf_path: Path, backend: str, command: List[str]):
    """
    Build the text source a statement template asks for.

    Args:
        pdf_path: Statement file
        backend: "command" for an external converter, "pdfplumber" for in-process extraction
        command: Converter argv, with "{path}" standing for the statement

    Returns:
        Object with lines() and close()
    """
    if backend == "command":
        return TextConverter(pdf_path, command)
    if backend == "pdfplumber":
        return PlumberTextSource(pdf_path)
    raise ValueError(f"Unknown text source backend: {backend}")
