"""Mini README: Interactive session state owned by the interface layer.

Structure:
    * ExpenseSession - ledger plus the selected day and displayed month.
    * demo_drafts - deterministic sample expenses for UI previews.

The calendar and report are derived on demand from the ledger; the session
only remembers what the user is looking at.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Dict, List, Optional, Union

from ..calendar_grid import (
    CalendarMonth,
    Direction,
    MonthView,
    build_month_view,
    navigate_month,
    to_calendar_day,
)
from ..calendar_grid.grid import MONTH_NAMES
from ..ledger import Expense, ExpenseCategory, ExpenseDraft, ExpenseLedger, PaymentMode
from ..logging_utils import get_logger
from .forms import ExpenseForm

LOGGER = get_logger(__name__)


def demo_drafts(today: date) -> List[ExpenseDraft]:
    """Build sample expenses around ``today`` spanning the current and previous month."""

    last_month = CalendarMonth.from_date(today).shifted(-1).first_day
    return [
        ExpenseDraft(
            date=today,
            amount=42.5,
            description="Team lunch",
            payment_mode=PaymentMode.CREDIT,
            category=ExpenseCategory.TRAVEL,
        ),
        ExpenseDraft(
            date=today,
            amount=19.99,
            description="Cloud storage",
            payment_mode=PaymentMode.DEBIT,
            category=ExpenseCategory.TECHNOLOGY,
        ),
        ExpenseDraft(
            date=last_month + timedelta(days=9),
            amount=1200.0,
            description="Office rent",
            payment_mode=PaymentMode.DEBIT,
            category=ExpenseCategory.OPERATIONAL_COSTS,
        ),
        ExpenseDraft(
            date=last_month + timedelta(days=14),
            amount=85.0,
            description="Printer paper",
            payment_mode=PaymentMode.CASH,
            category=ExpenseCategory.INVENTORY,
        ),
    ]


def format_long_date(day: date) -> str:
    """Render headings such as ``February 29, 2024``."""

    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


@dataclass(slots=True)
class ExpenseSession:
    """What one user is looking at, plus their ledger."""

    ledger: ExpenseLedger
    selected_day: date
    displayed_month: CalendarMonth
    currency_symbol: str = "$"

    @classmethod
    def start(
        cls,
        *,
        time_reference: tzinfo = timezone.utc,
        today: Optional[date] = None,
        currency_symbol: str = "$",
        seed_demo: bool = False,
    ) -> "ExpenseSession":
        """Open a session on today's date in the pinned time reference."""

        if today is None:
            today = datetime.now(time_reference).date()
        ledger = ExpenseLedger(time_reference=time_reference)
        if seed_demo:
            for draft in demo_drafts(today):
                ledger.add(draft)
        LOGGER.debug("Session started on %s with %s expenses", today, len(ledger))
        return cls(
            ledger=ledger,
            selected_day=today,
            displayed_month=CalendarMonth.from_date(today),
            currency_symbol=currency_symbol,
        )

    def select_day(self, day: Union[date, datetime]) -> date:
        """Select a calendar cell; the displayed month stays where it is."""

        self.selected_day = to_calendar_day(day, self.ledger.time_reference)
        return self.selected_day

    def navigate(self, direction: Union[Direction, str]) -> CalendarMonth:
        self.displayed_month = navigate_month(
            self.displayed_month, direction, self.ledger.time_reference
        )
        LOGGER.debug("Displayed month is now %s", self.displayed_month.isoformat())
        return self.displayed_month

    def add_expense(self, form: ExpenseForm) -> Expense:
        """Record the submitted form on the selected day."""

        return self.ledger.add(form.to_draft(self.selected_day))

    def delete_expense(self, expense_id: str) -> None:
        self.ledger.delete(expense_id)

    def month_view(self) -> MonthView:
        return build_month_view(self.ledger, self.displayed_month, self.selected_day)

    def daily_summary(self) -> Dict[str, object]:
        """Heading and entries for the selected day's expense list."""

        expenses = self.ledger.expenses_on_day(self.selected_day)
        return {
            "date": self.selected_day.isoformat(),
            "heading": format_long_date(self.selected_day),
            "expenses": [
                {
                    **expense.as_dict(),
                    "display_amount": expense.display_amount(self.currency_symbol),
                }
                for expense in expenses
            ],
        }
