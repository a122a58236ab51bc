"""Mini README: Core package initializer for the expense manager.

Exposes the logger factory plus the ledger and calendar entry points so
callers can record expenses and build month grids without knowing the
package layout. The web interface is imported separately because it pulls
in FastAPI.
"""

from .calendar_grid import CalendarMonth, calendar_days, navigate_month
from .ledger import ExpenseCategory, ExpenseDraft, ExpenseLedger, PaymentMode
from .logging_utils import get_logger

__all__ = [
    "CalendarMonth",
    "ExpenseCategory",
    "ExpenseDraft",
    "ExpenseLedger",
    "PaymentMode",
    "calendar_days",
    "get_logger",
    "navigate_month",
]
