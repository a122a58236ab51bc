"""Mini README: Month calendar helpers.

The ``grid`` module holds the date arithmetic (Sunday-first week grids and
month navigation); ``view`` decorates a grid with ledger information so the
web interface can render it without further computation.
"""

from .grid import (
    WEEKDAY_LABELS,
    CalendarMonth,
    Direction,
    calendar_days,
    end_of_week,
    last_day_of_month,
    navigate_month,
    start_of_week,
    to_calendar_day,
)
from .view import CalendarCell, MonthView, build_month_view

__all__ = [
    "WEEKDAY_LABELS",
    "CalendarCell",
    "CalendarMonth",
    "Direction",
    "MonthView",
    "build_month_view",
    "calendar_days",
    "end_of_week",
    "last_day_of_month",
    "navigate_month",
    "start_of_week",
    "to_calendar_day",
]
