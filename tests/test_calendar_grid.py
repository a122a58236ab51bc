"""Mini README: Tests for calendar grid generation and month navigation.

Validates Sunday-first grids across month boundaries, round-trip navigation,
and the month view flags rendered by the interface.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from expense_manager.calendar_grid import (
    CalendarMonth,
    Direction,
    build_month_view,
    calendar_days,
    end_of_week,
    last_day_of_month,
    navigate_month,
    start_of_week,
)
from expense_manager.ledger import ExpenseCategory, ExpenseDraft, ExpenseLedger, PaymentMode

SUNDAY = 6
SATURDAY = 5


def test_leap_february_grid_spans_adjacent_months() -> None:
    """February 2024 starts on Thursday and fills five full weeks."""

    days = calendar_days(CalendarMonth(2024, 2))

    assert days[0] == date(2024, 1, 28)
    assert days[-1] == date(2024, 3, 2)
    assert len(days) == 35


@pytest.mark.parametrize("year", [2023, 2024, 2025, 2026])
def test_grids_fill_whole_weeks_for_every_month(year: int) -> None:
    """Every grid starts Sunday, ends Saturday and covers its month exactly once."""

    for month_number in range(1, 13):
        month = CalendarMonth(year, month_number)
        days = calendar_days(month)

        assert len(days) % 7 == 0
        assert days[0].weekday() == SUNDAY
        assert days[-1].weekday() == SATURDAY
        assert all(later - earlier == timedelta(days=1) for earlier, later in zip(days, days[1:]))
        in_month = [day for day in days if month.contains(day)]
        assert in_month[0] == month.first_day
        assert in_month[-1] == month.last_day
        assert len(in_month) == len(set(in_month)) == month.last_day.day


def test_month_starting_on_sunday_has_no_leading_days() -> None:
    """February 2015 starts Sunday and ends Saturday, giving exactly four weeks."""

    days = calendar_days(date(2015, 2, 14))

    assert days[0] == date(2015, 2, 1)
    assert days[-1] == date(2015, 2, 28)
    assert len(days) == 28


def test_week_boundaries_and_month_end() -> None:
    """Week helpers snap to Sunday and Saturday; month ends respect leap years."""

    assert start_of_week(date(2024, 2, 1)) == date(2024, 1, 28)
    assert start_of_week(date(2024, 1, 28)) == date(2024, 1, 28)
    assert end_of_week(date(2024, 2, 29)) == date(2024, 3, 2)
    assert end_of_week(date(2024, 3, 2)) == date(2024, 3, 2)
    assert last_day_of_month(2024, 2) == date(2024, 2, 29)
    assert last_day_of_month(2023, 2) == date(2023, 2, 28)
    assert last_day_of_month(2024, 12) == date(2024, 12, 31)


def test_navigate_month_crosses_year_boundaries() -> None:
    """Navigation wraps December to January and back."""

    assert navigate_month(CalendarMonth(2024, 12), "next") == CalendarMonth(2025, 1)
    assert navigate_month(CalendarMonth(2025, 1), Direction.PREV) == CalendarMonth(2024, 12)
    assert navigate_month(date(2024, 1, 31), "next") == CalendarMonth(2024, 2)


def test_navigate_next_then_prev_returns_original() -> None:
    """Stepping forward then back lands on the starting month."""

    for month_number in range(1, 13):
        month = CalendarMonth(2024, month_number)
        assert navigate_month(navigate_month(month, "next"), "prev") == month


def test_navigate_month_rejects_unknown_direction() -> None:
    """Directions other than prev and next raise ValueError."""

    with pytest.raises(ValueError):
        navigate_month(CalendarMonth(2024, 1), "sideways")


def test_calendar_month_parsing_and_labels() -> None:
    """Months parse from YYYY-MM and render long and short labels."""

    month = CalendarMonth.parse("2024-02")

    assert month.label == "February 2024"
    assert month.short_label == "Feb 2024"
    assert month.isoformat() == "2024-02"
    with pytest.raises(ValueError):
        CalendarMonth.parse("February")
    with pytest.raises(ValueError):
        CalendarMonth(2024, 13)


def test_month_view_flags_selection_and_expense_days() -> None:
    """Cells know whether they are in the month, selected, or hold expenses."""

    ledger = ExpenseLedger()
    ledger.add(
        ExpenseDraft(
            date=date(2024, 1, 29),
            amount=30.0,
            description="Software licence",
            payment_mode=PaymentMode.CREDIT,
            category=ExpenseCategory.TECHNOLOGY,
        )
    )

    view = build_month_view(ledger, CalendarMonth(2024, 2), selected_day=date(2024, 2, 14))
    cells = {cell.day: cell for cell in view.cells}

    assert len(view.weeks) == 5
    assert not cells[date(2024, 1, 29)].in_month
    assert cells[date(2024, 1, 29)].has_expenses
    assert cells[date(2024, 2, 14)].selected
    assert sum(cell.selected for cell in view.cells) == 1
    payload = view.as_dict()
    assert payload["label"] == "February 2024"
    assert payload["weekdays"][0] == "Sun"
    assert payload["cells"][0] == {
        "date": "2024-01-28",
        "day": 28,
        "in_month": False,
        "selected": False,
        "has_expenses": False,
    }


@pytest.mark.parametrize("month", [CalendarMonth(1, 1), CalendarMonth(9999, 12)])
def test_grids_outside_the_date_range_raise_value_error(month: CalendarMonth) -> None:
    """Grids whose first or last week leaves the date range are rejected cleanly."""

    with pytest.raises(ValueError):
        calendar_days(month)


def test_grids_next_to_the_date_range_limits_still_build() -> None:
    """February of year 1 and November of year 9999 stay inside the range."""

    assert calendar_days(CalendarMonth(1, 2))[0] == date(1, 1, 28)
    assert calendar_days(CalendarMonth(9999, 11))[-1] == date(9999, 12, 4)
    with pytest.raises(ValueError):
        navigate_month(CalendarMonth(9999, 12), "next")


def test_aware_timestamps_pick_their_month_in_the_time_reference() -> None:
    """A UTC timestamp early on March 1st belongs to February five hours west."""

    eastern = timezone(timedelta(hours=-5))
    moment = datetime(2024, 3, 1, 2, 0, tzinfo=timezone.utc)

    assert calendar_days(moment)[0] == date(2024, 2, 25)
    assert calendar_days(moment, eastern)[0] == date(2024, 1, 28)
    assert navigate_month(moment, "next", eastern) == CalendarMonth(2024, 3)
    assert navigate_month(moment, "next") == CalendarMonth(2024, 4)
