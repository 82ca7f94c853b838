"""
Attribution patterns: map transaction descriptors to ledger accounts.
"""
import csv
import re
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional
import logging

from ..core.errors import MalformedPatternFile
from ..models.schema import AttributionPattern, CategorizationRules

logger = logging.getLogger(__name__)


def load_patterns(path: Path) -> List[AttributionPattern]:
    """
    Load attribution patterns from a CSV of (regex, date, account) rows.

    The date column is either empty (any date) or YYYY-MM-DD. Blank lines
    are skipped.

    Args:
        path: Pattern CSV

    Returns:
        Patterns in file order

    Raises:
        MalformedPatternFile: If the file is unreadable, a row is short, or a regex or date is invalid
    """
    patterns = []
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            for fields in reader:
                if not fields:
                    continue
                patterns.append(_compile_row(path, reader.line_num, fields))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise MalformedPatternFile(f"{path}: {e}") from e

    logger.info(f"Loaded {len(patterns)} attribution patterns from {path}")
    return patterns


def _compile_row(path: Path, line_no: int, fields: List[str]) -> AttributionPattern:
    if len(fields) < 3:
        raise MalformedPatternFile(f"{path}:{line_no}: not enough fields")
    re_text, date_text, account = fields[0], fields[1], fields[2]

    try:
        pattern = re.compile(re_text)
    except re.error as e:
        raise MalformedPatternFile(f"{path}:{line_no}: bad regex {re_text!r}: {e}") from e

    on_date = None
    if date_text:
        try:
            on_date = datetime.strptime(date_text, "%Y-%m-%d").date()
        except ValueError as e:
            raise MalformedPatternFile(f"{path}:{line_no}: parse: {date_text!r}: {e}") from e

    return AttributionPattern(pattern=pattern, date=on_date, account=account)


def categorize(rules: CategorizationRules, on_date: date, descriptor: str) -> str:
    """
    Pick the ledger account for a transaction.

    Payments are recognized before any pattern is consulted. After that the
    first pattern whose regex matches and whose date is unset or equal wins.

    Args:
        rules: Patterns and fixed accounts
        on_date: Transaction date
        descriptor: Transaction descriptor

    Returns:
        Account name
    """
    if rules.payment_pattern.search(descriptor):
        return rules.payment_account
    for pat in rules.patterns:
        if not pat.pattern.search(descriptor):
            continue
        if pat.date is None or pat.date == on_date:
            return pat.account
    return rules.default_account


def build_rules(pattern_path: Optional[Path] = None) -> CategorizationRules:
    """Rules for an invocation: the fixed accounts plus patterns from pattern_path, if given."""
    patterns = load_patterns(pattern_path) if pattern_path else []
    return CategorizationRules(patterns=patterns)
