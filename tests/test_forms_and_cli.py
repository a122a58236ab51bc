"""Mini README: Tests for the add-expense form, settings, and the CLI.

Structure:
    * form validation turns raw text into a ledger draft.
    * settings reject unknown calendar timezones.
    * ``show-calendar`` prints the month grid and rejects out-of-range months.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from expense_manager.calendar_grid import CalendarMonth
from expense_manager.configuration import ExpenseManagerSettings, get_settings
from expense_manager.interface import ExpenseForm
from expense_manager.ledger import ExpenseCategory, PaymentMode
from run_expense_manager import cli


def test_form_parses_text_fields_into_draft() -> None:
    """Raw form strings become a typed draft dated on the chosen day."""

    form = ExpenseForm(
        amount=" 19.90 ",
        description="  Printer ink ",
        payment_mode="DEBIT",
        category="inventory and supplies",
    )
    draft = form.to_draft(date(2024, 5, 2))

    assert draft.amount == pytest.approx(19.9)
    assert draft.description == "Printer ink"
    assert draft.payment_mode is PaymentMode.DEBIT
    assert draft.category is ExpenseCategory.INVENTORY
    assert draft.date == date(2024, 5, 2)


def test_form_requires_description_and_category() -> None:
    """A blank description or a missing category fails validation."""

    with pytest.raises(ValidationError):
        ExpenseForm(amount="5", description="", category="Insurance")
    with pytest.raises(ValidationError):
        ExpenseForm(amount="5", description="Premium")


def test_form_accepts_zero_amount() -> None:
    """Zero is a valid amount and the payment mode defaults to cash."""

    form = ExpenseForm(amount="0", description="Free sample", category="Others")

    assert form.amount == 0
    assert form.payment_mode is PaymentMode.CASH


def test_settings_validate_calendar_timezone() -> None:
    """Known zones are accepted and unknown ones rejected."""

    assert ExpenseManagerSettings(calendar_timezone="UTC").time_reference is timezone.utc
    with pytest.raises(ValidationError):
        ExpenseManagerSettings(calendar_timezone="Mars/Olympus_Mons")


def test_show_calendar_prints_grid() -> None:
    """February 2024 prints a header, weekday row and five weeks."""

    result = CliRunner().invoke(cli, ["show-calendar", "2024-02"])

    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0] == "February 2024"
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert len(lines) == 7
    assert lines[2].split()[0] == "(28)"
    assert lines[-1].split()[-1] == "(2)"


def test_show_calendar_rejects_malformed_month() -> None:
    """Months that do not look like YYYY-MM are reported as bad parameters."""

    result = CliRunner().invoke(cli, ["show-calendar", "Feb"])

    assert result.exit_code != 0


@pytest.mark.parametrize("amount", ["inf", "-inf", "nan", "1e400"])
def test_form_rejects_non_finite_amounts(amount: str) -> None:
    """Infinite or undefined amounts never reach the ledger."""

    with pytest.raises(ValidationError):
        ExpenseForm(amount=amount, description="Overflow", category="Others")


def test_form_stores_negative_zero_as_zero() -> None:
    """A typed ``-0`` is kept as positive zero so it displays as $0.00."""

    form = ExpenseForm(amount="-0", description="Refund slip", category="Others")

    assert form.amount == 0
    assert math.copysign(1.0, form.amount) == 1.0
    assert form.to_draft(date(2024, 5, 2)).amount == 0.0


def test_show_calendar_rejects_months_outside_the_date_range() -> None:
    """January of year 1 is a bad parameter rather than a crash."""

    result = CliRunner().invoke(cli, ["show-calendar", "0001-01"])

    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)


def test_show_calendar_defaults_to_the_current_month() -> None:
    """Without an argument the grid shows the current month in the pinned zone."""

    settings = get_settings()
    expected = CalendarMonth.from_date(
        datetime.now(settings.time_reference), settings.time_reference
    )

    result = CliRunner().invoke(cli, ["show-calendar"])

    assert result.exit_code == 0
    assert result.output.splitlines()[0] == expected.label
