"""
Pydantic models for credit card statement data.
"""
import re
import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Category(str, Enum):
    """Statement sections. The value is the marker text printed on the statement."""
    PAYMENTS = "PAYMENTS AND OTHER CREDITS"
    PURCHASE = "PURCHASE"
    FEES = "FEES CHARGED"
    REDEMPTIONS = "PURCHASES AND REDEMPTIONS"

    @property
    def header_label(self) -> Optional[str]:
        """Label of the printed subtotal this section reconciles against."""
        return _HEADER_LABELS.get(self)


_HEADER_LABELS = {
    Category.PAYMENTS: "Payment, Credits",
    Category.PURCHASE: "Purchases",
    Category.FEES: "Fees Charged",
}


class RawTransaction(BaseModel):
    """A transaction row as printed, before amount and date interpretation."""
    model_config = ConfigDict(frozen=True)

    category: Category
    raw_date: str
    descriptor: str
    raw_amount: str


class RawStatement(BaseModel):
    """Everything extraction pulled out of one statement's text."""
    transactions: List[RawTransaction] = Field(default_factory=list)
    headers: Dict[str, str] = Field(default_factory=dict)
    last4: Optional[str] = None


class Transaction(BaseModel):
    """Individual transaction record."""
    model_config = ConfigDict(frozen=True)

    category: Category
    date: datetime.date
    descriptor: str
    amount_cents: int


class Statement(BaseModel):
    """Complete statement data structure."""
    model_config = ConfigDict(frozen=True)

    start_date: datetime.date
    end_date: datetime.date
    last4: str = ""
    transactions: List[Transaction] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_billing_period(self):
        if self.start_date > self.end_date:
            raise ValueError(
                f"Billing period starts after it ends: {self.start_date} > {self.end_date}"
            )
        return self


class StatementRecord(BaseModel):
    """One row of the extraction CSV: category, last4, date, descriptor, cents."""
    model_config = ConfigDict(frozen=True)

    category: Category
    last4: str
    date: datetime.date
    descriptor: str
    amount_cents: int

    @field_validator("amount_cents", mode="before")
    @classmethod
    def validate_cents_text(cls, v):
        """CSV cents must be a plain signed integer, never a decimal."""
        if isinstance(v, str) and not re.fullmatch(r"[+-]?[0-9]+", v):
            raise ValueError(f"amount in cents must be an integer, got {v!r}")
        return v


class AttributionPattern(BaseModel):
    """Maps a descriptor (and optionally an exact date) to a ledger account."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    pattern: re.Pattern
    date: Optional[datetime.date] = None
    account: str


class CategorizationRules(BaseModel):
    """Ordered attribution patterns plus the fixed payment and fallback accounts."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    patterns: List[AttributionPattern] = Field(default_factory=list)
    payment_pattern: re.Pattern = re.compile(
        r"(AUTOMATIC PAYMENT - THANK YOU)|(PAYMENT THANK YOU)"
    )
    payment_account: str = "Assets:Checking"
    default_account: str = "Expenses:Unknown"
