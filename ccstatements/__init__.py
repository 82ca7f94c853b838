"""
Credit card statement extraction and reconciliation.

Turns converter text of vendor credit card statements into dated,
amount-bearing transactions, checks them against the statement's printed
subtotals, and renders categorized transactions as ledger entries.
"""

__version__ = "1.0.0"

from .core.errors import (
    StatementError,
    IOFailure,
    ConverterFailure,
    MalformedAmount,
    MalformedDate,
    MissingHeader,
    ReconciliationMismatch,
    DateOutOfRange,
    MissingSection,
    MalformedPatternFile,
    MalformedRecord,
)
from .core.money import format_cents
from .core.normalize import parse_amount
from .core.extract import extract
from .core.reconcile import reconcile
from .core.interpret import interpret, resolve_date
from .core.runner import StatementProcessor, process_files
from .ledger.categorize import categorize, load_patterns
from .models.schema import (
    Category,
    RawTransaction,
    RawStatement,
    Transaction,
    Statement,
    StatementRecord,
    AttributionPattern,
    CategorizationRules,
)

__all__ = [
    "StatementError",
    "IOFailure",
    "ConverterFailure",
    "MalformedAmount",
    "MalformedDate",
    "MissingHeader",
    "ReconciliationMismatch",
    "DateOutOfRange",
    "MissingSection",
    "MalformedPatternFile",
    "MalformedRecord",
    "format_cents",
    "parse_amount",
    "extract",
    "reconcile",
    "interpret",
    "resolve_date",
    "StatementProcessor",
    "process_files",
    "categorize",
    "load_patterns",
    "Category",
    "RawTransaction",
    "RawStatement",
    "Transaction",
    "Statement",
    "StatementRecord",
    "AttributionPattern",
    "CategorizationRules",
]
