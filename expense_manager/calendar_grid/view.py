"""Mini README: Renderable month view combining the grid with a ledger.

Structure:
    * CalendarCell - one day of the grid with display flags.
    * MonthView - header label, weekday headings and the ordered cells.
    * build_month_view - assemble a view for a month, ledger and selected day.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Dict, List, Optional

from .grid import WEEKDAY_LABELS, CalendarMonth, calendar_days

if TYPE_CHECKING:
    from ..ledger import ExpenseLedger


@dataclass(frozen=True, slots=True)
class CalendarCell:
    """Single day in the month grid."""

    day: date
    in_month: bool
    selected: bool
    has_expenses: bool

    def as_dict(self) -> Dict[str, object]:
        return {
            "date": self.day.isoformat(),
            "day": self.day.day,
            "in_month": self.in_month,
            "selected": self.selected,
            "has_expenses": self.has_expenses,
        }


@dataclass(slots=True)
class MonthView:
    month: CalendarMonth
    cells: List[CalendarCell] = field(default_factory=list)

    @property
    def weeks(self) -> List[List[CalendarCell]]:
        return [self.cells[index : index + 7] for index in range(0, len(self.cells), 7)]

    def as_dict(self) -> Dict[str, object]:
        return {
            "month": self.month.isoformat(),
            "label": self.month.label,
            "weekdays": list(WEEKDAY_LABELS),
            "cells": [cell.as_dict() for cell in self.cells],
        }


def build_month_view(
    ledger: "ExpenseLedger",
    month: CalendarMonth,
    selected_day: Optional[date] = None,
) -> MonthView:
    """Mark each grid day as in-month, selected, and whether it holds expenses."""

    expense_days = {expense.date for expense in ledger.list_expenses()}
    cells = [
        CalendarCell(
            day=day,
            in_month=month.contains(day),
            selected=day == selected_day,
            has_expenses=day in expense_days,
        )
        for day in calendar_days(month)
    ]
    return MonthView(month=month, cells=cells)
