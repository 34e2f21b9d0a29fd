from __future__ import annotations
import datetime as dt
import enum
from decimal import Decimal
from pydantic import BaseModel, ConfigDict

from ..periods import BudgetPeriod


class UtilizationLevel(enum.Enum):
    """Colour band for how much of a budget has been used."""
    OK = "ok"
    WARNING = "warning"
    DANGER = "danger"


class CategorySpending(BaseModel):
    category_id: str
    amount: Decimal
    percentage: float

    model_config = ConfigDict(frozen=True)


class MonthlySpending(BaseModel):
    month: str
    amount: Decimal

    model_config = ConfigDict(frozen=True)


class DaySpending(BaseModel):
    date: dt.date
    amount: Decimal
    count: int

    model_config = ConfigDict(frozen=True)


class BudgetUtilization(BaseModel):
    """
    Spend against a budget.

    `percentage` is capped at 100 for display; `raw_percentage` and
    `overage` report how far past the budget the spending went.
    """
    spent: Decimal
    percentage: float
    raw_percentage: float
    overage: Decimal
    remaining: Decimal
    is_over_budget: bool
    level: UtilizationLevel

    model_config = ConfigDict(frozen=True)


class BudgetSummary(BaseModel):
    total_budget: Decimal
    total_spent: Decimal
    remaining: Decimal
    percent_used: float
    level: UtilizationLevel


class BudgetCard(BaseModel):
    budget_id: str
    category_id: str
    category_name: str
    color: str | None = None
    icon: str | None = None
    period: BudgetPeriod
    amount: Decimal
    start_date: dt.date
    end_date: dt.date
    utilization: BudgetUtilization


class CategorySpendingItem(CategorySpending):
    """Category breakdown row with display details resolved."""
    category_name: str
    color: str | None = None
    icon: str | None = None


class TransactionItem(BaseModel):
    id: str
    amount: Decimal
    description: str
    date: dt.date
    category_id: str
    category_name: str
    color: str | None = None


class Dashboard(BaseModel):
    reference_date: dt.date
    current_month: str
    month_spending: Decimal
    summary: BudgetSummary
    top_categories: list[CategorySpendingItem]
    budget_cards: list[BudgetCard]
    recent_transactions: list[TransactionItem]
    monthly_trend: list[MonthlySpending]
