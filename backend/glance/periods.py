"""
Date parsing and calendar windows.

All windows are inclusive on both ends: (first_day, last_day).
"""

import calendar
import enum
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .errors import InvalidArgumentError


class BudgetPeriod(enum.Enum):
    """Recurrence window a budget applies to."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class PeriodKind(enum.Enum):
    """Report window relative to a reference date."""
    LAST_MONTHS = "last_months"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class ReportPeriod:
    """
    A report window.

    LAST_MONTHS covers `months` whole calendar months ending with the
    reference date's month. MONTH is the reference month, YEAR the
    reference calendar year.
    """
    kind: PeriodKind
    months: int = 1

    def __post_init__(self):
        if self.kind == PeriodKind.LAST_MONTHS and self.months < 1:
            raise InvalidArgumentError("months must be at least 1")

    @classmethod
    def last_months(cls, months: int) -> "ReportPeriod":
        return cls(PeriodKind.LAST_MONTHS, months)

    @classmethod
    def month(cls) -> "ReportPeriod":
        return cls(PeriodKind.MONTH)

    @classmethod
    def year(cls) -> "ReportPeriod":
        return cls(PeriodKind.YEAR)


def _local_date(value: datetime) -> date:
    # Browsers send local midnight as UTC; convert back before dropping the time
    if value.tzinfo is not None:
        return value.astimezone().date()
    return value.date()


def parse_date(value: date | datetime | str) -> date:
    """
    Parse an ISO-8601 date or datetime into a calendar date.

    Accepts `2025-04-01` as well as full timestamps such as
    `2025-03-31T22:00:00.000Z`. Timestamps with an offset are converted
    to the local timezone first; naive ones keep the date as written.
    """
    if isinstance(value, datetime):
        try:
            return _local_date(value)
        except OverflowError:
            raise InvalidArgumentError(f"Invalid date: {value!r}")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return _local_date(datetime.fromisoformat(text))
        except (ValueError, OverflowError):
            pass
    raise InvalidArgumentError(f"Invalid date: {value!r}")


def add_months(d: date, months: int) -> date:
    """Add months to a date, clamping day to valid range."""
    month = d.month - 1 + months
    year = d.year + month // 12
    month = month % 12 + 1
    max_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, max_day))


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def report_window(period: ReportPeriod, reference_date: date) -> tuple[date, date]:
    """Inclusive window for a report period around a reference date."""
    if period.kind == PeriodKind.YEAR:
        return date(reference_date.year, 1, 1), date(reference_date.year, 12, 31)

    _, end = month_bounds(reference_date.year, reference_date.month)
    if period.kind == PeriodKind.MONTH:
        return reference_date.replace(day=1), end

    try:
        start = add_months(reference_date.replace(day=1), -(period.months - 1))
    except ValueError:
        raise InvalidArgumentError(
            f"last {period.months} months before {reference_date} is out of range"
        )
    return start, end


def budget_window(period: BudgetPeriod, reference_date: date) -> tuple[date, date]:
    """
    The budget period containing the reference date.

    Weeks run Monday to Sunday.
    """
    if period == BudgetPeriod.WEEKLY:
        start = reference_date - timedelta(days=reference_date.weekday())
        try:
            return start, start + timedelta(days=6)
        except OverflowError:
            raise InvalidArgumentError(f"week of {reference_date} is out of range")
    if period == BudgetPeriod.YEARLY:
        return date(reference_date.year, 1, 1), date(reference_date.year, 12, 31)
    return month_bounds(reference_date.year, reference_date.month)
