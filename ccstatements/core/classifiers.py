"""
Line classification for converted statement text.

Each line is tried against the section, header, account-number and
transaction patterns in that order; the first that matches wins.
"""
import re
from typing import NamedTuple, Optional, Union

from ..models.schema import Category

SECTION_PATTERN = re.compile(
    r"^\s*(" + "|".join(
        re.escape(c.value) for c in sorted(Category, key=lambda c: -len(c.value))
    ) + r")(?=\s|$)"
)

HEADER_PATTERN = re.compile(
    r"^\s*((?:\S|\s\S)+)[ \t]{2,}"
    r"((?:[+-]?\s*[$][0-9,]+\.\d{2})|(?:\d{2}/\d{2}/\d{2} - \d{2}/\d{2}/\d{2}))"
)

ACCOUNT_PATTERN = re.compile(r"Account Number:\s*\d{4} \d{4} \d{4} (\d{4})")

TRANSACTION_PATTERN = re.compile(
    r"(\d{1,2}/\d{1,2})(?:\s*&\s*\d{1,2}/\d{1,2})?\s*(.*)\s{3,}((?:-\s*)?[0-9,]*\.\d+)"
)


class SectionMarker(NamedTuple):
    category: Category


class HeaderLine(NamedTuple):
    label: str
    value: str


class AccountNumberLine(NamedTuple):
    last4: str


class TransactionRow(NamedTuple):
    raw_date: str
    descriptor: str
    raw_amount: str


Classification = Union[SectionMarker, HeaderLine, AccountNumberLine, TransactionRow]


def match_section(line: str) -> Optional[SectionMarker]:
    match = SECTION_PATTERN.search(line)
    if match:
        return SectionMarker(Category(match.group(1)))
    return None


def match_header(line: str) -> Optional[HeaderLine]:
    match = HEADER_PATTERN.search(line)
    if match:
        return HeaderLine(match.group(1), match.group(2))
    return None


def match_account_number(line: str) -> Optional[AccountNumberLine]:
    match = ACCOUNT_PATTERN.search(line)
    if match:
        return AccountNumberLine(match.group(1))
    return None


def match_transaction(line: str) -> Optional[TransactionRow]:
    match = TRANSACTION_PATTERN.search(line)
    if match:
        return TransactionRow(match.group(1), match.group(2).rstrip(" "), match.group(3))
    return None


CLASSIFIERS = (match_section, match_header, match_account_number, match_transaction)


def classify_line(line: str) -> Optional[Classification]:
    """
    Classify one normalized line of statement text.

    Args:
        line: Line with backticks and the terminator already removed

    Returns:
        The first matching classification, or None for lines to ignore
    """
    for classifier in CLASSIFIERS:
        result = classifier(line)
        if result is not None:
            return result
    return None
