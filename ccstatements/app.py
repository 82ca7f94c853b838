#!/usr/bin/env python3
"""
CLI interface for credit card statement extraction and ledger rendering.
"""
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .core.detectors import default_template, load_template
from .core.errors import MalformedPatternFile, StatementError
from .core.runner import StatementProcessor, process_files
from .ledger.categorize import build_rules
from .ledger.render import render_file, render_preamble

app = typer.Typer(help="Credit card statement extractor")
console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def parse(
    pdf_paths: List[Path] = typer.Argument(..., help="Statement PDFs, processed in order"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Statement template YAML"),
    converter: Optional[str] = typer.Option(
        None, "--converter", help="Text source: 'command' (external converter) or 'pdfplumber'"
    ),
    debug: bool = typer.Option(False, "--debug", help="Print every transaction and header"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Exit after first parse failure"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Extract and reconcile statements, writing a CSV beside each PDF."""
    _configure_logging(verbose)

    try:
        template = load_template(config) if config else default_template()
    except StatementError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(2)
    if converter:
        if converter not in ("command", "pdfplumber"):
            err_console.print(f"[red]Error: unknown converter: {escape(converter)}[/red]")
            raise typer.Exit(2)
        template.converter.backend = converter

    processor = StatementProcessor(template, console=console, debug=debug)
    failures = process_files(pdf_paths, processor, fail_fast=fail_fast)

    for failure in failures:
        message = f"process({str(failure.path)!r}): {failure.error}"
        err_console.print(f"[red]{escape(message)}[/red]")
    if failures:
        raise typer.Exit(1)


@app.command()
def ledger(
    csv_paths: List[Path] = typer.Argument(..., help="CSV files written by 'parse'"),
    patterns: Optional[Path] = typer.Option(
        None, "--patterns", "-p", help="Path to an attribution-pattern CSV"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Render extracted transactions as ledger entries on standard output."""
    _configure_logging(verbose)

    try:
        rules = build_rules(patterns)
    except MalformedPatternFile as e:
        err_console.print(f"[red]parsing patterns: {escape(str(e))}[/red]")
        raise typer.Exit(2)

    typer.echo(render_preamble(), nl=False)

    ok = True
    for csv_path in csv_paths:
        try:
            text = render_file(rules, csv_path)
        except StatementError as e:
            ok = False
            err_console.print(f"[red]{escape(str(csv_path))}: {escape(str(e))}[/red]")
            continue
        typer.echo(text, nl=False)

    if not ok:
        raise typer.Exit(1)


def main():
    app()


if __name__ == "__main__":
    main()
