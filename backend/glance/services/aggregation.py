"""
Aggregation engine.

Pure functions that turn snapshots of expenses, budgets and categories into
derived views: totals, category breakdowns, monthly trends and budget
utilization. Inputs are never mutated; every call builds new values.

Empty inputs and unmatched category ids are not errors. They produce zero
totals and empty breakdowns so an empty book still renders a dashboard.
"""

import calendar
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from ..periods import (
    BudgetPeriod,
    ReportPeriod,
    budget_window,
    parse_date,
    report_window,
)
from ..schemas import (
    Budget,
    BudgetUtilization,
    Category,
    CategorySpending,
    DaySpending,
    Expense,
    MonthlySpending,
    UtilizationLevel,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
UNKNOWN_CATEGORY = "Unknown Category"
MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Dashboard colour thresholds, in percent of budget used
WARNING_THRESHOLD = 75
DANGER_THRESHOLD = 90


def _percent(part: Decimal, whole: Decimal) -> float:
    if whole == 0:
        return 0.0
    return float(part / whole * HUNDRED)


def total_spending(expenses: Iterable[Expense]) -> Decimal:
    """Sum of expense amounts."""
    return sum((e.amount for e in expenses), ZERO)


def total_budget(budgets: Iterable[Budget]) -> Decimal:
    """Sum of budget amounts."""
    return sum((b.amount for b in budgets), ZERO)


def expenses_for_category(expenses: Iterable[Expense], category_id: str) -> list[Expense]:
    return [e for e in expenses if e.category_id == category_id]


def spending_by_category(expenses: Iterable[Expense], category_id: str) -> Decimal:
    """Total spent in one category; 0 when nothing matches."""
    return total_spending(expenses_for_category(expenses, category_id))


def category_breakdown(expenses: Sequence[Expense]) -> list[CategorySpending]:
    """
    Group expenses by category.

    Rows come out in order of first appearance. Sort with sort_by_amount
    when a display order is needed.
    """
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category_id] = totals.get(expense.category_id, ZERO) + expense.amount

    grand_total = sum(totals.values(), ZERO)
    return [
        CategorySpending(
            category_id=category_id,
            amount=amount,
            percentage=_percent(amount, grand_total),
        )
        for category_id, amount in totals.items()
    ]


def sort_by_amount(rows: Iterable[CategorySpending]) -> list[CategorySpending]:
    """Largest spending first; ties keep category id order."""
    return sorted(rows, key=lambda r: (-r.amount, r.category_id))


def monthly_trend(expenses: Iterable[Expense], year: int) -> list[MonthlySpending]:
    """Twelve entries, January to December, for the given year."""
    totals = [ZERO] * 12
    for expense in expenses:
        if expense.date.year == year:
            totals[expense.date.month - 1] += expense.amount

    return [
        MonthlySpending(month=label, amount=amount)
        for label, amount in zip(MONTH_LABELS, totals)
    ]


def daily_spending(expenses: Iterable[Expense], year: int, month: int) -> list[DaySpending]:
    """One entry per calendar day of the month, including empty days."""
    days_in_month = calendar.monthrange(year, month)[1]
    amounts = [ZERO] * days_in_month
    counts = [0] * days_in_month
    for expense in expenses:
        if expense.date.year == year and expense.date.month == month:
            amounts[expense.date.day - 1] += expense.amount
            counts[expense.date.day - 1] += 1

    return [
        DaySpending(date=date(year, month, day + 1), amount=amounts[day], count=counts[day])
        for day in range(days_in_month)
    ]


def utilization_level(percentage: float) -> UtilizationLevel:
    if percentage > DANGER_THRESHOLD:
        return UtilizationLevel.DANGER
    if percentage > WARNING_THRESHOLD:
        return UtilizationLevel.WARNING
    return UtilizationLevel.OK


def budget_utilization(budget: Budget, expenses_for_budget: Iterable[Expense]) -> BudgetUtilization:
    """
    Compare spending against a budget.

    The caller picks the expenses (usually one category inside the budget's
    current period); they are summed as given.
    """
    spent = total_spending(expenses_for_budget)
    raw_percentage = _percent(spent, budget.amount)
    percentage = min(100.0, raw_percentage)
    return BudgetUtilization(
        spent=spent,
        percentage=percentage,
        raw_percentage=raw_percentage,
        overage=max(ZERO, spent - budget.amount),
        remaining=budget.amount - spent,
        is_over_budget=spent > budget.amount,
        level=utilization_level(percentage),
    )


def filter_between(expenses: Iterable[Expense], start: date, end: date) -> list[Expense]:
    """Expenses dated within [start, end]."""
    return [e for e in expenses if start <= e.date <= end]


def filter_by_period(
    expenses: Iterable[Expense],
    reference_date: date | str,
    period: ReportPeriod,
) -> list[Expense]:
    """Expenses inside a report window relative to reference_date."""
    start, end = report_window(period, parse_date(reference_date))
    return filter_between(expenses, start, end)


def budget_period_window(period: BudgetPeriod, reference_date: date | str) -> tuple[date, date]:
    """The week, month or year containing reference_date."""
    return budget_window(period, parse_date(reference_date))


def current_budget_utilization(
    budget: Budget,
    expenses: Iterable[Expense],
    reference_date: date | str,
) -> BudgetUtilization:
    """Utilization of a budget over its period containing reference_date."""
    start, end = budget_period_window(budget.period, reference_date)
    in_period = filter_between(expenses_for_category(expenses, budget.category_id), start, end)
    return budget_utilization(budget, in_period)


def find_category(categories: Iterable[Category], category_id: str) -> Category | None:
    for category in categories:
        if category.id == category_id:
            return category
    return None


def category_name(categories: Iterable[Category], category_id: str) -> str:
    category = find_category(categories, category_id)
    return category.name if category else UNKNOWN_CATEGORY


def budget_for_category(
    budgets: Iterable[Budget],
    category_id: str,
    period: BudgetPeriod | None = None,
) -> Budget | None:
    """First budget for a category, optionally restricted to one period."""
    for budget in budgets:
        if budget.category_id != category_id:
            continue
        if period is None or budget.period == period:
            return budget
    return None
