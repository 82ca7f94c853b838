"""
Raw extraction: fold a stream of statement text lines into a RawStatement.
"""
from typing import Callable, Iterable, Optional
import logging

from .classifiers import (
    AccountNumberLine,
    HeaderLine,
    SectionMarker,
    TransactionRow,
    classify_line,
)
from .errors import MissingSection
from .normalize import normalize_line
from ..models.schema import Category, RawStatement, RawTransaction

logger = logging.getLogger(__name__)


class RawExtractor:
    """Accumulates section-tagged rows, header values and the account number."""

    def __init__(self, on_transaction: Optional[Callable[[RawTransaction], None]] = None):
        self.on_transaction = on_transaction
        self.section: Optional[Category] = None
        self.statement = RawStatement()
        self.line_no = 0

    def feed(self, line: str):
        """Classify one line of converter output and record what it carries."""
        self.line_no += 1
        result = classify_line(normalize_line(line))

        if isinstance(result, SectionMarker):
            logger.debug(f"Line {self.line_no}: section {result.category.value}")
            self.section = result.category
        elif isinstance(result, HeaderLine):
            self.statement.headers[result.label] = result.value
        elif isinstance(result, AccountNumberLine):
            self.statement.last4 = result.last4
        elif isinstance(result, TransactionRow):
            if self.section is None:
                raise MissingSection(
                    f"line {self.line_no}: transaction found without a section: {line.strip()!r}"
                )
            txn = RawTransaction(
                category=self.section,
                raw_date=result.raw_date,
                descriptor=result.descriptor,
                raw_amount=result.raw_amount,
            )
            self.statement.transactions.append(txn)
            if self.on_transaction:
                self.on_transaction(txn)


def extract(lines: Iterable[str],
            on_transaction: Optional[Callable[[RawTransaction], None]] = None) -> RawStatement:
    """
    Extract the raw statement from converted text.

    Args:
        lines: Converter output, consumed lazily
        on_transaction: Called with every accepted transaction row

    Returns:
        RawStatement with transactions in source order

    Raises:
        MissingSection: If a transaction row precedes every section marker
    """
    extractor = RawExtractor(on_transaction)
    for line in lines:
        extractor.feed(line)

    logger.info(
        f"Extracted {len(extractor.statement.transactions)} transactions, "
        f"{len(extractor.statement.headers)} headers"
    )
    return extractor.statement
