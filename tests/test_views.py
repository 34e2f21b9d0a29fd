from datetime import date
from decimal import Decimal

from glance.periods import BudgetPeriod
from glance.schemas import UtilizationLevel
from glance.services import Snapshot, load_sample_data
from glance.services.aggregation import UNKNOWN_CATEGORY
from glance.services.views import (
    budget_cards,
    budget_summary,
    dashboard,
    recent_transactions,
    search_expenses,
)

from conftest import make_budget, make_expense


def test_search_is_case_insensitive_and_newest_first(april_expenses):
    expenses = april_expenses + [make_expense(30, "2", "2025-04-20", id="e3", description="grocery run")]

    result = search_expenses(expenses, search="GROCERY")
    assert [e.id for e in result] == ["e3", "e2"]


def test_search_filters_by_category(april_expenses):
    assert [e.id for e in search_expenses(april_expenses, category_id="1")] == ["e1"]
    assert [e.id for e in search_expenses(april_expenses)] == ["e2", "e1"]


def test_recent_transactions_resolve_unknown_category(april_expenses, categories):
    items = recent_transactions(april_expenses, categories[:1], limit=5)

    assert [i.id for i in items] == ["e2", "e1"]
    assert items[0].category_name == UNKNOWN_CATEGORY
    assert items[0].color is None
    assert items[1].category_name == "Housing"


def test_recent_transactions_limit(april_expenses, categories):
    assert len(recent_transactions(april_expenses, categories, limit=1)) == 1


def test_budget_summary(april_expenses):
    summary = budget_summary([make_budget(1300, "1"), make_budget(400, "2")], april_expenses)

    assert summary.total_budget == Decimal("1700")
    assert summary.total_spent == Decimal("1285")
    assert summary.remaining == Decimal("415")
    assert summary.level == UtilizationLevel.WARNING


def test_budget_summary_without_budgets(april_expenses):
    summary = budget_summary([], april_expenses)
    assert summary.percent_used == 0
    assert summary.remaining == Decimal("-1285")


def test_budget_cards_use_each_budget_period(april_expenses, categories):
    snapshot = Snapshot(
        expenses=april_expenses,
        budgets=[
            make_budget(1300, "1", BudgetPeriod.MONTHLY),
            make_budget(50, "2", BudgetPeriod.WEEKLY),
            make_budget(10, "gone", BudgetPeriod.YEARLY),
        ],
        categories=categories,
    )
    cards = budget_cards(snapshot, date(2025, 4, 2))

    assert cards[0].utilization.spent == Decimal("1200")
    assert cards[0].color == "budget-purple-400"
    # Groceries on the 5th fall in the week of Mar 31 - Apr 6
    assert cards[1].start_date == date(2025, 3, 31)
    assert cards[1].utilization.is_over_budget is True
    assert cards[2].category_name == UNKNOWN_CATEGORY
    assert cards[2].utilization.spent == 0


def test_dashboard_with_sample_data(store):
    assert load_sample_data(store, date(2025, 4, 1)) == 10
    assert load_sample_data(store, date(2025, 4, 1)) == 0

    view = dashboard(store.snapshot(), date(2025, 4, 25))

    assert view.current_month == "Apr 2025"
    assert view.month_spending == Decimal("1780")
    assert view.summary.total_budget == Decimal("2600")
    assert view.top_categories[0].category_name == "Housing"
    assert view.top_categories[0].amount == Decimal("1200")
    assert len(view.top_categories) == 5
    assert len(view.budget_cards) == 4
    assert view.recent_transactions[0].description == "Uber rides"
    assert view.monthly_trend[3].amount == Decimal("1780")


def test_dashboard_on_empty_store(store):
    view = dashboard(store.snapshot(), date(2025, 4, 25))

    assert view.month_spending == 0
    assert view.top_categories == []
    assert view.budget_cards == []
    assert len(view.monthly_trend) == 12
