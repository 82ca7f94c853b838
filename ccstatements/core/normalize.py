"""
Amount parsing and line normalization.
"""
import re

from .errors import MalformedAmount

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_WHITESPACE = re.compile(r"\s+")


def parse_amount(text: str) -> int:
    """
    Parse a printed currency amount into exact cents.

    Thousands separators, whitespace, one decimal point and one currency
    symbol are removed, and what is left must be a signed integer. Exactly
    two fractional digits are assumed.

    Args:
        text: Printed amount, e.g. "-$1,234.56" or "- 5.00"

    Returns:
        Signed amount in cents

    Raises:
        MalformedAmount: If the residue is not a signed integer
    """
    cleaned = text.replace(",", "")
    cleaned = _WHITESPACE.sub("", cleaned)
    cleaned = cleaned.replace(".", "", 1)
    cleaned = cleaned.replace("$", "", 1)

    if not _SIGNED_DIGITS.fullmatch(cleaned):
        raise MalformedAmount(text)
    return int(cleaned)


def normalize_line(line: str) -> str:
    """Drop the line terminator and the backticks the converter leaves between columns."""
    return line.rstrip("\r\n").replace("`", "")
