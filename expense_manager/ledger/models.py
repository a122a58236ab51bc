"""Mini README: Expense records and the enumerations they draw from.

Structure:
    * PaymentMode - how an expense was paid (cash, credit, debit).
    * ExpenseCategory - fixed business expense categories.
    * ExpenseDraft - every expense field except the identifier.
    * Expense - immutable record stored by the ledger.
    * MonthlyTotal - one bar of the monthly report.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Union


class PaymentMode(str, Enum):
    """Supported payment modes."""

    CASH = "cash"
    CREDIT = "credit"
    DEBIT = "debit"

    @property
    def label(self) -> str:
        return _PAYMENT_MODE_LABELS[self]

    @classmethod
    def from_str(cls, value: str) -> "PaymentMode":
        """Coerce arbitrary casing into a valid payment mode."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported payment mode: {value}") from error


_PAYMENT_MODE_LABELS = {
    PaymentMode.CASH: "Cash",
    PaymentMode.CREDIT: "Credit Card",
    PaymentMode.DEBIT: "Debit Card",
}


class ExpenseCategory(str, Enum):
    """Expense categories offered by the category picker."""

    OPERATIONAL_COSTS = "Operational Costs"
    PAYROLL = "Payroll and Employee Benefits"
    TRAVEL = "Travel and Entertainment"
    MARKETING = "Marketing and Advertising"
    PROFESSIONAL_SERVICES = "Professional Services"
    TECHNOLOGY = "Technology and Software"
    INVENTORY = "Inventory and Supplies"
    INSURANCE = "Insurance"
    TAXES = "Taxes and Licenses"
    DEPRECIATION = "Depreciation"
    AMORTIZATION = "Amortization"
    OTHERS = "Others"

    @classmethod
    def from_str(cls, value: str) -> "ExpenseCategory":
        """Match a category by label or member name, ignoring case."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported expense category: {value}") from error
        for category in cls:
            if normalised in (category.value.lower(), category.name.lower()):
                return category
        raise ValueError(f"Unsupported expense category: {value}")


@dataclass(frozen=True, slots=True)
class ExpenseDraft:
    """Fields supplied by the form before the ledger assigns an identifier."""

    date: Union[date, datetime]
    amount: float
    description: str
    payment_mode: PaymentMode
    category: ExpenseCategory


@dataclass(frozen=True, slots=True)
class Expense:
    """A recorded expense. Never mutated once the ledger has created it."""

    expense_id: str
    date: date
    amount: float
    description: str
    payment_mode: PaymentMode
    category: ExpenseCategory

    def display_amount(self, currency_symbol: str = "$") -> str:
        return f"{currency_symbol}{self.amount:.2f}"

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values."""

        return {
            "expense_id": self.expense_id,
            "date": self.date.isoformat(),
            "amount": self.amount,
            "description": self.description,
            "payment_mode": self.payment_mode.value,
            "payment_mode_label": self.payment_mode.label,
            "category": self.category.value,
        }


@dataclass(frozen=True, slots=True)
class MonthlyTotal:
    """Sum of expense amounts for one calendar month."""

    month: str
    total: float

    def as_dict(self) -> Dict[str, object]:
        return {"month": self.month, "total": self.total}


def category_options() -> List[str]:
    return [category.value for category in ExpenseCategory]


def payment_mode_options() -> List[Dict[str, str]]:
    return [{"value": mode.value, "label": mode.label} for mode in PaymentMode]
