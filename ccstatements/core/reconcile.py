"""
Reconciliation of extracted transactions against the statement's printed subtotals.
"""
from typing import Dict, List, Sequence
import logging

from .errors import MalformedAmount, MissingHeader, ReconciliationMismatch
from .normalize import parse_amount
from ..models.schema import Category, RawStatement

logger = logging.getLogger(__name__)

DEFAULT_EXPECTATIONS: List[Category] = [c for c in Category if c.header_label is not None]


def compute_totals(raw: RawStatement) -> Dict[Category, int]:
    """Sum transaction amounts per section, in cents."""
    totals: Dict[Category, int] = {}
    for txn in raw.transactions:
        try:
            cents = parse_amount(txn.raw_amount)
        except MalformedAmount as e:
            raise MalformedAmount(txn.raw_amount, f"transaction {txn.descriptor!r}") from e
        totals[txn.category] = totals.get(txn.category, 0) + cents
    return totals


def reconcile(raw: RawStatement,
              expectations: Sequence[Category] = DEFAULT_EXPECTATIONS) -> Dict[Category, int]:
    """
    Check every expected section total against its printed subtotal header.

    A section with no transactions totals zero.

    Args:
        raw: Extracted statement
        expectations: Sections whose subtotal header must be present and agree

    Returns:
        Per-section totals in cents

    Raises:
        MalformedAmount: If a transaction amount or subtotal cannot be parsed
        MissingHeader: If an expected subtotal header is absent
        ReconciliationMismatch: If a computed total differs from its header
    """
    totals = compute_totals(raw)

    for category in expectations:
        label = category.header_label
        if label not in raw.headers:
            raise MissingHeader(label)

        try:
            expected = parse_amount(raw.headers[label])
        except MalformedAmount as e:
            raise MalformedAmount(raw.headers[label], f"parsing header {label!r}") from e

        computed = totals.get(category, 0)
        if computed != expected:
            raise ReconciliationMismatch(category.value, label, computed, expected)
        logger.debug(f"{category.value} reconciled against {label!r}: {computed} cents")

    return totals
