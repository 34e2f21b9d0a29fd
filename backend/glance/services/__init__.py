from .record_store import (
    RecordStore,
    Collection,
    Mutation,
    Snapshot,
    DEFAULT_CATEGORIES,
)
from .aggregation import (
    total_spending,
    total_budget,
    spending_by_category,
    expenses_for_category,
    category_breakdown,
    sort_by_amount,
    monthly_trend,
    daily_spending,
    budget_utilization,
    current_budget_utilization,
    utilization_level,
    filter_by_period,
    filter_between,
    budget_period_window,
    find_category,
    category_name,
    budget_for_category,
    UNKNOWN_CATEGORY,
)
from .views import (
    budget_summary,
    budget_cards,
    recent_transactions,
    search_expenses,
    category_items,
    transaction_items,
    dashboard,
)
from .sample_data import load_sample_data

__all__ = [
    "RecordStore",
    "Collection",
    "Mutation",
    "Snapshot",
    "DEFAULT_CATEGORIES",
    "total_spending",
    "total_budget",
    "spending_by_category",
    "expenses_for_category",
    "category_breakdown",
    "sort_by_amount",
    "monthly_trend",
    "daily_spending",
    "budget_utilization",
    "current_budget_utilization",
    "utilization_level",
    "filter_by_period",
    "filter_between",
    "budget_period_window",
    "find_category",
    "category_name",
    "budget_for_category",
    "UNKNOWN_CATEGORY",
    "budget_summary",
    "budget_cards",
    "recent_transactions",
    "search_expenses",
    "category_items",
    "transaction_items",
    "dashboard",
    "load_sample_data",
]
