"""
Render categorized transactions as plain-text ledger entries.
"""
from pathlib import Path
from typing import Iterable
import logging

from .categorize import categorize
from ..core.export import read_records
from ..core.money import format_cents
from ..models.schema import Category, CategorizationRules, StatementRecord

logger = logging.getLogger(__name__)

PREAMBLE = "; -*- mode: ledger -*-\n\n"


def render_preamble() -> str:
    return PREAMBLE


def render_entry(record: StatementRecord, account: str) -> str:
    """
    Render one transaction as a two-posting ledger entry.

    The card is a liability, so the statement amount is negated on its posting;
    the categorized account takes the balancing amount implicitly.
    """
    return (
        f"{record.date.isoformat()} {record.descriptor}\n"
        f"  Liabilities:{record.last4}  $ {format_cents(-record.amount_cents)}\n"
        f"  {account}\n"
        "\n"
    )


def render_records(rules: CategorizationRules, records: Iterable[StatementRecord]) -> str:
    """
    Render every record of an extraction CSV.

    Reward redemptions do not touch the card balance and are skipped.
    """
    entries = []
    for record in records:
        if record.category == Category.REDEMPTIONS:
            continue
        account = categorize(rules, record.date, record.descriptor)
        logger.debug(f"{record.descriptor!r} -> {account}")
        entries.append(render_entry(record, account))
    return "".join(entries)


def render_file(rules: CategorizationRules, csv_path: Path) -> str:
    """
    Render an extraction CSV in full.

    Rows are all read and categorized before anything is returned, so a
    malformed row yields no output for the file.
    """
    return render_records(rules, list(read_records(csv_path)))
