"""Mini README: Expense ledger package.

Groups the immutable expense records, their enumerations, and the in-memory
ledger that answers per-day and per-month questions for the calendar and
report views.
"""

from .ledger import ExpenseLedger
from .models import (
    Expense,
    ExpenseCategory,
    ExpenseDraft,
    MonthlyTotal,
    PaymentMode,
    category_options,
    payment_mode_options,
)

__all__ = [
    "Expense",
    "ExpenseCategory",
    "ExpenseDraft",
    "ExpenseLedger",
    "MonthlyTotal",
    "PaymentMode",
    "category_options",
    "payment_mode_options",
]
