"""Mini README: Calendar arithmetic on plain calendar dates.

Structure:
    * Direction - enum of month navigation steps.
    * CalendarMonth - normalised (year, month) reference for a displayed month.
    * calendar_days - Sunday-first grid of dates covering a whole month.
    * navigate_month - move a reference month one step forward or backward.
    * to_calendar_day - reduce dates and timestamps to a calendar day.

Every comparison happens on (year, month, day) components. Timestamps are
converted into one explicit time reference before the day is taken, so the
host's local timezone never decides which cell an expense lands in.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import List, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

DateLike = Union[date, datetime]


class Direction(str, Enum):
    """Month navigation steps offered by the calendar header."""

    PREV = "prev"
    NEXT = "next"

    @property
    def offset(self) -> int:
        return 1 if self is Direction.NEXT else -1

    @classmethod
    def from_str(cls, value: str) -> "Direction":
        """Coerce arbitrary casing into a navigation direction."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported navigation direction: {value}") from error


def to_calendar_day(value: DateLike, time_reference: tzinfo = timezone.utc) -> date:
    """Return the calendar day of ``value`` as seen in ``time_reference``.

    Aware datetimes are converted into the reference first; naive datetimes are
    taken at face value and plain dates pass through untouched.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(time_reference)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def last_day_of_month(year: int, month: int) -> date:
    """Return the final date of the given month."""

    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def _days_since_sunday(day: date) -> int:
    return (day.weekday() + 1) % 7


def start_of_week(day: date) -> date:
    """Return the Sunday that opens the week containing ``day``."""

    try:
        return day - timedelta(days=_days_since_sunday(day))
    except OverflowError as error:
        raise ValueError(f"The week of {day.isoformat()} starts before year 1") from error


def end_of_week(day: date) -> date:
    """Return the Saturday that closes the week containing ``day``."""

    try:
        return day + timedelta(days=6 - _days_since_sunday(day))
    except OverflowError as error:
        raise ValueError(f"The week of {day.isoformat()} ends after year 9999") from error


@dataclass(frozen=True, slots=True, order=True)
class CalendarMonth:
    """A displayed month, always anchored on its first day."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be within 1..12, got {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValueError(f"Year must be within 1..9999, got {self.year}")

    @classmethod
    def from_date(cls, value: DateLike, time_reference: tzinfo = timezone.utc) -> "CalendarMonth":
        day = to_calendar_day(value, time_reference)
        return cls(day.year, day.month)

    @classmethod
    def parse(cls, value: str) -> "CalendarMonth":
        """Parse ``YYYY-MM`` strings such as ``2024-02``."""

        try:
            year_text, month_text = value.strip().split("-")
            return cls(int(year_text), int(month_text))
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Months must look like YYYY-MM, got {value!r}") from error

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return last_day_of_month(self.year, self.month)

    @property
    def label(self) -> str:
        """Header label such as ``February 2024``."""

        return f"{MONTH_NAMES[self.month - 1]} {self.year:04d}"

    @property
    def short_label(self) -> str:
        """Report label such as ``Feb 2024``."""

        return f"{MONTH_ABBREVIATIONS[self.month - 1]} {self.year:04d}"

    def contains(self, day: date) -> bool:
        return (day.year, day.month) == (self.year, self.month)

    def shifted(self, months: int) -> "CalendarMonth":
        index = self.year * 12 + (self.month - 1) + months
        return CalendarMonth(index // 12, index % 12 + 1)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


MonthLike = Union[CalendarMonth, date, datetime]


def _as_month(value: MonthLike, time_reference: tzinfo) -> CalendarMonth:
    if isinstance(value, CalendarMonth):
        return value
    return CalendarMonth.from_date(value, time_reference)


def calendar_days(
    reference_month: MonthLike, time_reference: tzinfo = timezone.utc
) -> List[date]:
    """Return every date shown in the month grid, Sunday through Saturday.

    The grid starts on the Sunday on or before the first of the month and ends
    on the Saturday on or after its last day, so the result always fills whole
    weeks and includes the trailing and leading days of adjacent months.
    Aware timestamps pick their month in ``time_reference``. Grids that would
    run outside the ``date`` range (January of year 1, December of year 9999)
    raise ``ValueError``.
    """

    month = _as_month(reference_month, time_reference)
    current = start_of_week(month.first_day)
    final = end_of_week(month.last_day)
    days: List[date] = []
    while current <= final:
        days.append(current)
        current += timedelta(days=1)
    LOGGER.debug(
        "Generated %s calendar cells for %s (%s -> %s)",
        len(days),
        month.isoformat(),
        days[0],
        days[-1],
    )
    return days


def navigate_month(
    current: MonthLike,
    direction: Union[Direction, str],
    time_reference: tzinfo = timezone.utc,
) -> CalendarMonth:
    """Shift the reference month by exactly one month in ``direction``."""

    step = direction if isinstance(direction, Direction) else Direction.from_str(direction)
    return _as_month(current, time_reference).shifted(step.offset)
