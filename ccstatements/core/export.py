"""
CSV serialization of statements, and reading the CSV back for the ledger stage.

Columns: category, last4, date (YYYY-MM-DD), descriptor, amount in cents.
"""
import csv
import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence
import logging

from pydantic import ValidationError

from .errors import IOFailure, MalformedRecord
from ..models.schema import Statement, StatementRecord

logger = logging.getLogger(__name__)

FIELDS = ["category", "last4", "date", "descriptor", "amount_cents"]


def statement_records(stmt: Statement) -> List[StatementRecord]:
    """Flatten a statement into one record per transaction."""
    return [
        StatementRecord(
            category=txn.category,
            last4=stmt.last4,
            date=txn.date,
            descriptor=txn.descriptor,
            amount_cents=txn.amount_cents,
        )
        for txn in stmt.transactions
    ]


def csv_path_for(pdf_path: Path, suffixes: Sequence[str] = (".pdf",)) -> Optional[Path]:
    """Sibling CSV path for a statement file, or None if its extension is not a statement's."""
    if pdf_path.suffix.lower() in {s.lower() for s in suffixes}:
        return pdf_path.with_suffix(".csv")
    return None


def write_csv(path: Path, stmt: Statement):
    """
    Write a statement's transactions as CSV rows.

    The file is written beside its destination and renamed into place, so a
    failed write never leaves a partial CSV behind.
    """
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with open(tmp_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            for record in statement_records(stmt):
                writer.writerow([
                    record.category.value,
                    record.last4,
                    record.date.isoformat(),
                    record.descriptor,
                    str(record.amount_cents),
                ])
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise IOFailure(f"writing {path}: {e}") from e

    logger.info(f"Wrote {len(stmt.transactions)} transactions to {path}")


def read_records(path: Path) -> Iterator[StatementRecord]:
    """
    Read an extraction CSV back into records.

    Raises:
        IOFailure: If the file cannot be opened
        MalformedRecord: If a row has the wrong shape or an unparsable field
    """
    try:
        f = open(path, "r", newline="", encoding="utf-8")
    except OSError as e:
        raise IOFailure(f"cannot open {path}: {e}") from e

    with f:
        reader = csv.reader(f)
        try:
            for fields in reader:
                if not fields:
                    continue
                yield _record(path, reader.line_num, fields)
        except (UnicodeDecodeError, csv.Error) as e:
            raise MalformedRecord(f"{path}:{reader.line_num}: {e}") from e


def _record(path: Path, line_no: int, fields: List[str]) -> StatementRecord:
    if len(fields) < len(FIELDS):
        raise MalformedRecord(f"{path}:{line_no}: expected {len(FIELDS)} fields, got {len(fields)}")
    try:
        return StatementRecord.model_validate(dict(zip(FIELDS, fields)))
    except ValidationError as e:
        raise MalformedRecord(f"{path}:{line_no}: {e}") from e
