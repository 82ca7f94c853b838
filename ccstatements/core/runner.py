"""
End-to-end statement processing: text -> raw extraction -> reconciliation ->
interpretation -> CSV, one file at a time.
"""
from pathlib import Path
from typing import Dict, Iterable, List, NamedTuple, Optional
import logging

from rich.console import Console
from rich.table import Table

from .detectors import StatementTemplate, default_template
from .errors import StatementError
from .export import csv_path_for, write_csv
from .extract import extract
from .interpret import interpret
from .loader import open_text_source
from .money import format_cents
from .reconcile import compute_totals, reconcile
from ..models.schema import Category, RawStatement, RawTransaction, Statement

logger = logging.getLogger(__name__)


class ProcessResult(NamedTuple):
    path: Path
    statement: Statement
    totals: Dict[Category, int]
    csv_path: Optional[Path]


class Failure(NamedTuple):
    path: Path
    error: Exception


class StatementProcessor:
    """Runs the whole pipeline for a single statement file."""

    def __init__(self, template: Optional[StatementTemplate] = None,
                 console: Optional[Console] = None, debug: bool = False):
        self.template = template or default_template()
        self.console = console or Console()
        self.debug = debug

    def process(self, pdf_path: Path) -> ProcessResult:
        """
        Process a statement PDF.

        Totals are printed before reconciliation so a mismatch can be read
        against them. The CSV is only written once every check has passed.

        Args:
            pdf_path: Path to the statement

        Returns:
            ProcessResult

        Raises:
            StatementError: On any extraction, reconciliation or interpretation failure
        """
        source = open_text_source(
            pdf_path, self.template.converter.backend, self.template.converter.command
        )
        try:
            raw = extract(source.lines(), self._debug_transaction if self.debug else None)
        finally:
            source.close()

        totals = compute_totals(raw)
        self._print_totals(pdf_path, raw, totals)

        reconcile(raw)
        stmt = interpret(raw, self.template.date_header, self.template.lower_slack)

        csv_path = csv_path_for(pdf_path, self.template.statement_suffixes)
        if csv_path is not None:
            write_csv(csv_path, stmt)
        return ProcessResult(pdf_path, stmt, totals, csv_path)

    def _debug_transaction(self, txn: RawTransaction):
        self.console.print(
            f"{txn.category.value},{txn.raw_date},{txn.descriptor},{txn.raw_amount}",
            markup=False, highlight=False,
        )

    def _print_totals(self, pdf_path: Path, raw: RawStatement, totals: Dict[Category, int]):
        self.console.print(f"# statement: {pdf_path}", markup=False, highlight=False)
        table = Table(title="TOTALS", show_header=False, box=None)
        table.add_column("category", justify="right", width=30)
        table.add_column("amount", justify="right")
        for category, cents in totals.items():
            table.add_row(category.value, format_cents(cents, plus_sign=True))
        self.console.print(table)

        if self.debug:
            headers = Table(title="HEADERS", show_header=False, box=None)
            headers.add_column("label", justify="right", width=30)
            headers.add_column("value")
            for label, value in raw.headers.items():
                headers.add_row(label, value)
            self.console.print(headers)


def process_files(paths: Iterable[Path], processor: Optional[StatementProcessor] = None,
                  fail_fast: bool = False) -> List[Failure]:
    """
    Process statements in order, continuing past failures.

    Args:
        paths: Statement files, processed in the order given
        processor: Configured processor; a default one is built if omitted
        fail_fast: Stop after the first failure

    Returns:
        One Failure per file that did not process; empty when all succeeded
    """
    processor = processor or StatementProcessor()
    failures = []
    for path in paths:
        path = Path(path)
        try:
            processor.process(path)
        except (StatementError, OSError) as e:
            logger.debug(f"process({str(path)!r}) failed", exc_info=True)
            failures.append(Failure(path, e))
            if fail_fast:
                break
    return failures
