"""
Errors raised while turning a statement into verified transactions.

Any of these aborts processing of the file it was raised for; the driver
reports it and moves on to the next file.
"""
from typing import Optional

from .money import format_cents


class StatementError(Exception):
    """Base class for every per-file processing failure."""


class IOFailure(StatementError):
    """A file could not be opened or read, or the converter could not be spawned."""


class ConverterFailure(StatementError):
    """The text converter exited with a non-zero status."""

    def __init__(self, command: str, returncode: int):
        super().__init__(f"converting to text: {command} exited with status {returncode}")
        self.command = command
        self.returncode = returncode


class MalformedAmount(StatementError):
    """A printed amount could not be parsed into cents."""

    def __init__(self, text: str, context: Optional[str] = None):
        message = f"malformed amount {text!r}"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)
        self.text = text


class MalformedDate(StatementError):
    """A transaction date or billing period could not be parsed."""


class MissingHeader(StatementError):
    """A header line needed for reconciliation or interpretation was never seen."""

    def __init__(self, label: str, seen: Optional[list] = None):
        message = f"missing header: {label!r}"
        if seen is not None:
            message += f" (got {sorted(seen)!r})"
        super().__init__(message)
        self.label = label


class ReconciliationMismatch(StatementError):
    """The sum of a section's transactions disagrees with its printed subtotal."""

    def __init__(self, category: str, header: str, computed_cents: int, expected_cents: int):
        super().__init__(
            f"mismatch: {category}({format_cents(computed_cents)}) != "
            f"{header}({format_cents(expected_cents)})"
        )
        self.category = category
        self.header = header
        self.computed_cents = computed_cents
        self.expected_cents = expected_cents


class DateOutOfRange(StatementError):
    """A resolved transaction date falls outside the billing-period window."""


class MissingSection(StatementError):
    """A transaction row appeared before any section marker."""


class MalformedPatternFile(StatementError):
    """The attribution pattern CSV has a short row, a bad regex, or a bad date."""


class MalformedRecord(StatementError):
    """A row of an extraction CSV could not be read back."""
