"""Mini README: In-memory expense ledger.

Structure:
    * ExpenseLedger - ordered collection of expenses with day and month views.

The ledger belongs to whichever session created it; nothing here is global.
Identifiers are random UUID4 strings so successive additions never collide.
Day lookups reduce timestamps to calendar days in one pinned time reference
and compare (year, month, day) components only.
"""

from __future__ import annotations

import uuid
from datetime import date, timezone, tzinfo
from typing import Dict, Iterable, List, Optional, Tuple

from ..calendar_grid.grid import CalendarMonth, DateLike, to_calendar_day
from ..logging_utils import get_logger
from .models import Expense, ExpenseDraft, MonthlyTotal

LOGGER = get_logger(__name__)


def _new_expense_id() -> str:
    return str(uuid.uuid4())


class ExpenseLedger:
    """Manage a session's expenses and derive calendar and report views."""

    def __init__(
        self,
        expenses: Optional[Iterable[Expense]] = None,
        *,
        time_reference: tzinfo = timezone.utc,
    ) -> None:
        self.time_reference = time_reference
        self._expenses: List[Expense] = []
        for expense in expenses or ():
            self._register(expense)
        LOGGER.debug("Expense ledger initialised with %s expenses", len(self._expenses))

    def __len__(self) -> int:
        return len(self._expenses)

    def _register(self, expense: Expense) -> None:
        """Store an expense ensuring identifiers remain unique."""

        if any(existing.expense_id == expense.expense_id for existing in self._expenses):
            raise ValueError(f"Expense {expense.expense_id} already exists.")
        self._expenses.append(expense)

    def _day(self, value: DateLike) -> date:
        return to_calendar_day(value, self.time_reference)

    def add(self, draft: ExpenseDraft) -> Expense:
        """Record ``draft`` under a fresh identifier and return the stored expense."""

        expense = Expense(
            expense_id=_new_expense_id(),
            date=self._day(draft.date),
            amount=draft.amount,
            description=draft.description,
            payment_mode=draft.payment_mode,
            category=draft.category,
        )
        self._register(expense)
        LOGGER.info(
            "Added expense %s on %s for %.2f (%s)",
            expense.expense_id,
            expense.date.isoformat(),
            expense.amount,
            expense.category.value,
        )
        return expense

    def delete(self, expense_id: str) -> None:
        """Remove the expense with ``expense_id``; unknown identifiers are ignored."""

        remaining = [expense for expense in self._expenses if expense.expense_id != expense_id]
        if len(remaining) == len(self._expenses):
            LOGGER.debug("Delete ignored, expense %s not found", expense_id)
            return
        self._expenses = remaining
        LOGGER.info("Deleted expense %s", expense_id)

    def list_expenses(self) -> List[Expense]:
        """Return expenses in the order they were added."""

        return list(self._expenses)

    def get_expense(self, expense_id: str) -> Expense:
        """Retrieve an expense, raising informative errors when missing."""

        for expense in self._expenses:
            if expense.expense_id == expense_id:
                return expense
        raise KeyError(f"Expense {expense_id} not found")

    def expenses_on_day(self, day: DateLike) -> List[Expense]:
        """Return the expenses dated on the same calendar day as ``day``."""

        target = self._day(day)
        return [expense for expense in self._expenses if expense.date == target]

    def has_expenses_on(self, day: DateLike) -> bool:
        target = self._day(day)
        return any(expense.date == target for expense in self._expenses)

    def monthly_totals(self) -> List[MonthlyTotal]:
        """Sum amounts per calendar month, months listed in first-seen order."""

        totals: Dict[Tuple[int, int], float] = {}
        for expense in self._expenses:
            key = (expense.date.year, expense.date.month)
            totals[key] = totals.get(key, 0.0) + expense.amount
        report = [
            MonthlyTotal(month=CalendarMonth(year, month).short_label, total=total)
            for (year, month), total in totals.items()
        ]
        LOGGER.debug("Monthly totals computed for %s months", len(report))
        return report

    def export_snapshot(self) -> List[Dict[str, object]]:
        """Export expenses as JSON-ready dictionaries in ledger order."""

        return [expense.as_dict() for expense in self._expenses]
