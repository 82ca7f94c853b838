"""
Shared fixtures: sample statement lines, a template that "converts"
with cat so the subprocess path runs without Ghostscript, and a stand-in
for pdfplumber.open.
"""
import io

import pytest
from rich.console import Console

from .samples import STATEMENT_TEXT
from ..core import loader
from ..core.detectors import ConverterConfig, StatementTemplate


@pytest.fixture
def sample_lines():
    return STATEMENT_TEXT.splitlines(keepends=True)


@pytest.fixture
def cat_template():
    return StatementTemplate(
        template_id="test_cat",
        converter=ConverterConfig(backend="command", command=["cat", "{path}"]),
    )


@pytest.fixture
def quiet_console():
    return Console(file=io.StringIO(), width=120)


class FakePage:

    def __init__(self, text):
        self.text = text

    def extract_text(self, layout=False):
        assert layout
        return self.text


class FakePDF:

    def __init__(self, pages):
        self.pages = pages
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def plumber_pages(monkeypatch):
    """Patch pdfplumber.open to serve the sample statement across three pages, one without text."""
    lines = STATEMENT_TEXT.splitlines()
    half = len(lines) // 2
    pdf = FakePDF([
        FakePage("\n".join(lines[:half])),
        FakePage(None),
        FakePage("\n".join(lines[half:])),
    ])
    opened = []

    def fake_open(path):
        opened.append(path)
        return pdf

    monkeypatch.setattr(loader.pdfplumber, "open", fake_open)
    return pdf, opened
