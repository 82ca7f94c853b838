"""
Interpretation: give each transaction a full date and build the Statement.
"""
from datetime import date, datetime, timedelta
from typing import Tuple
import logging
import re

from .errors import DateOutOfRange, MalformedDate, MissingHeader
from .normalize import parse_amount
from ..models.schema import RawStatement, Statement, Transaction

logger = logging.getLogger(__name__)

DATE_HEADER = "Opening/Closing Date"
DEFAULT_LOWER_SLACK = timedelta(days=7)

_PERIOD_PATTERN = re.compile(r"(\d{2}/\d{2}/\d{2}) - (\d{2}/\d{2}/\d{2})")
_MONTH_DAY_PATTERN = re.compile(r"(\d{1,2})/(\d{1,2})")


def parse_billing_period(value: str) -> Tuple[date, date]:
    """
    Parse a "MM/DD/YY - MM/DD/YY" header value.

    Returns:
        (start_date, end_date)

    Raises:
        MalformedDate: If the value is not a valid range
    """
    match = _PERIOD_PATTERN.search(value)
    if not match:
        raise MalformedDate(f"can't parse date header: {value!r}")
    try:
        start = datetime.strptime(match.group(1), "%m/%d/%y").date()
        end = datetime.strptime(match.group(2), "%m/%d/%y").date()
    except ValueError as e:
        raise MalformedDate(f"can't parse date header {value!r}: {e}") from e
    if start > end:
        raise MalformedDate(f"billing period {start} - {end} ends before it starts")
    return start, end


def resolve_date(raw_date: str, start: date, end: date,
                 lower_slack: timedelta = DEFAULT_LOWER_SLACK) -> date:
    """
    Resolve a year-less "M/D" transaction date within a billing period.

    The year of the period's end is tried first; a date landing after the
    day following the period end is moved back a year.

    Args:
        raw_date: Date as printed, e.g. "12/27"
        start: First day of the billing period
        end: Last day of the billing period
        lower_slack: How far before the period start a transaction may be dated

    Returns:
        Full calendar date

    Raises:
        MalformedDate: If raw_date is not a month/day
        DateOutOfRange: If the resolved date is outside [start - lower_slack, end + 1 day]
    """
    match = _MONTH_DAY_PATTERN.fullmatch(raw_date.strip())
    if not match:
        raise MalformedDate(f"parse date({raw_date}): not a month/day")
    month, day = int(match.group(1)), int(match.group(2))
    try:
        date(2000, month, day)
    except ValueError as e:
        raise MalformedDate(f"parse date({raw_date}): {e}") from e

    min_date = start - lower_slack
    max_date = end + timedelta(days=1)

    resolved = None
    for year in (end.year, end.year - 1):
        try:
            candidate = date(year, month, day)
        except ValueError:
            # Feb 29 outside a leap year
            continue
        resolved = candidate
        if candidate <= max_date:
            break

    if resolved is None or resolved > max_date or resolved < min_date:
        interpreted = resolved.isoformat() if resolved else "no valid date"
        raise DateOutOfRange(
            f"date({raw_date}, interpreted as {interpreted}) out of range: "
            f"{min_date.isoformat()}--{max_date.isoformat()}"
        )
    return resolved


def interpret(raw: RawStatement, date_header: str = DATE_HEADER,
              lower_slack: timedelta = DEFAULT_LOWER_SLACK) -> Statement:
    """
    Materialize a Statement from a reconciled RawStatement.

    Args:
        raw: Extracted statement
        date_header: Label of the billing-period header
        lower_slack: Tolerance before the period start for transaction dates

    Returns:
        Statement with resolved dates and amounts in cents
    """
    if date_header not in raw.headers:
        raise MissingHeader(date_header, seen=list(raw.headers))
    start, end = parse_billing_period(raw.headers[date_header])
    logger.debug(f"Billing period {start} - {end}")

    transactions = []
    for txn in raw.transactions:
        transactions.append(Transaction(
            category=txn.category,
            date=resolve_date(txn.raw_date, start, end, lower_slack),
            descriptor=txn.descriptor,
            amount_cents=parse_amount(txn.raw_amount),
        ))

    return Statement(
        start_date=start,
        end_date=end,
        last4=raw.last4 or "",
        transactions=transactions,
    )
