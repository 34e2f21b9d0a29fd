"""
Page-level views built from a store snapshot: the dashboard, budget cards,
recent transactions and the searchable expense ledger.
"""

from collections.abc import Iterable, Sequence
from datetime import date

from ..periods import ReportPeriod
from ..schemas import (
    Budget,
    BudgetCard,
    BudgetSummary,
    Category,
    CategorySpending,
    CategorySpendingItem,
    Dashboard,
    Expense,
    TransactionItem,
)
from .aggregation import (
    MONTH_LABELS,
    budget_period_window,
    category_breakdown,
    category_name,
    current_budget_utilization,
    filter_by_period,
    find_category,
    monthly_trend,
    sort_by_amount,
    total_budget,
    total_spending,
    utilization_level,
)
from .record_store import Snapshot


def newest_first(expenses: Iterable[Expense]) -> list[Expense]:
    # Stable on date ties so insertion order breaks them
    return sorted(expenses, key=lambda e: e.date, reverse=True)


def budget_summary(budgets: Sequence[Budget], expenses: Sequence[Expense]) -> BudgetSummary:
    """Overall budget against overall spending."""
    budgeted = total_budget(budgets)
    spent = total_spending(expenses)
    percent_used = float(spent / budgeted * 100) if budgeted else 0.0
    return BudgetSummary(
        total_budget=budgeted,
        total_spent=spent,
        remaining=budgeted - spent,
        percent_used=percent_used,
        level=utilization_level(percent_used),
    )


def budget_cards(
    snapshot: Snapshot,
    reference_date: date,
    limit: int | None = None,
) -> list[BudgetCard]:
    """One card per budget, measured over the budget's current period."""
    budgets = snapshot.budgets if limit is None else snapshot.budgets[:limit]
    cards = []
    for budget in budgets:
        category = find_category(snapshot.categories, budget.category_id)
        start, end = budget_period_window(budget.period, reference_date)
        cards.append(BudgetCard(
            budget_id=budget.id,
            category_id=budget.category_id,
            category_name=category_name(snapshot.categories, budget.category_id),
            color=category.color if category else None,
            icon=category.icon if category else None,
            period=budget.period,
            amount=budget.amount,
            start_date=start,
            end_date=end,
            utilization=current_budget_utilization(budget, snapshot.expenses, reference_date),
        ))
    return cards


def transaction_items(
    expenses: Iterable[Expense],
    categories: Sequence[Category],
) -> list[TransactionItem]:
    items = []
    for expense in expenses:
        category = find_category(categories, expense.category_id)
        items.append(TransactionItem(
            **expense.model_dump(),
            category_name=category_name(categories, expense.category_id),
            color=category.color if category else None,
        ))
    return items


def recent_transactions(
    expenses: Sequence[Expense],
    categories: Sequence[Category],
    limit: int = 5,
) -> list[TransactionItem]:
    return transaction_items(newest_first(expenses)[:limit], categories)


def search_expenses(
    expenses: Iterable[Expense],
    search: str = "",
    category_id: str | None = None,
) -> list[Expense]:
    """
    Expense ledger filter.

    Matches a case-insensitive substring of the description and, if given,
    an exact category. Results are newest first.
    """
    needle = search.strip().lower()
    matches = [
        e for e in expenses
        if needle in e.description.lower()
        and (not category_id or e.category_id == category_id)
    ]
    return newest_first(matches)


def category_items(
    rows: Iterable[CategorySpending],
    categories: Sequence[Category],
) -> list[CategorySpendingItem]:
    items = []
    for row in rows:
        category = find_category(categories, row.category_id)
        items.append(CategorySpendingItem(
            **row.model_dump(),
            category_name=category_name(categories, row.category_id),
            color=category.color if category else None,
            icon=category.icon if category else None,
        ))
    return items


def dashboard(
    snapshot: Snapshot,
    reference_date: date,
    top_categories: int = 5,
    card_limit: int = 4,
    recent_limit: int = 5,
) -> Dashboard:
    """Everything the dashboard page shows, for the month of reference_date."""
    month_expenses = filter_by_period(snapshot.expenses, reference_date, ReportPeriod.month())
    breakdown = sort_by_amount(category_breakdown(month_expenses))

    return Dashboard(
        reference_date=reference_date,
        current_month=f"{MONTH_LABELS[reference_date.month - 1]} {reference_date.year}",
        month_spending=total_spending(month_expenses),
        summary=budget_summary(snapshot.budgets, month_expenses),
        top_categories=category_items(breakdown[:top_categories], snapshot.categories),
        budget_cards=budget_cards(snapshot, reference_date, limit=card_limit),
        recent_transactions=recent_transactions(snapshot.expenses, snapshot.categories, recent_limit),
        monthly_trend=monthly_trend(snapshot.expenses, reference_date.year),
    )
