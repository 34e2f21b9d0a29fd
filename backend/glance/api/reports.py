from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query

from ..errors import InvalidArgumentError
from ..periods import PeriodKind, ReportPeriod
from ..schemas import (
    BudgetCard,
    BudgetSummary,
    CategorySpendingItem,
    Dashboard,
    DaySpending,
    Expense,
    MonthlySpending,
)
from ..services import (
    RecordStore,
    budget_cards,
    budget_summary,
    category_breakdown,
    category_items,
    daily_spending,
    dashboard,
    filter_by_period,
    monthly_trend,
    sort_by_amount,
)
from .deps import get_store, reference_date_or_today

router = APIRouter()

MAX_REPORT_MONTHS = 1200


def _expenses_in_period(
    expenses: list[Expense],
    reference_date: str | None,
    period: PeriodKind,
    months: int,
) -> list[Expense]:
    ref = reference_date_or_today(reference_date)
    try:
        return filter_by_period(expenses, ref, ReportPeriod(period, months))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/dashboard", response_model=Dashboard)
def get_dashboard(
    reference_date: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    ref = reference_date_or_today(reference_date)
    try:
        return dashboard(store.snapshot(), ref)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/summary", response_model=BudgetSummary)
def get_summary(
    period: PeriodKind = Query(PeriodKind.MONTH),
    months: int = Query(1, le=MAX_REPORT_MONTHS),
    reference_date: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    """All budgets against spending in the report period."""
    snapshot = store.snapshot()
    expenses = _expenses_in_period(snapshot.expenses, reference_date, period, months)
    return budget_summary(snapshot.budgets, expenses)


@router.get("/category-breakdown", response_model=list[CategorySpendingItem])
def get_category_breakdown(
    period: PeriodKind = Query(PeriodKind.MONTH),
    months: int = Query(1, le=MAX_REPORT_MONTHS),
    reference_date: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    """Spending per category in the report period, largest first."""
    snapshot = store.snapshot()
    expenses = _expenses_in_period(snapshot.expenses, reference_date, period, months)
    rows = sort_by_amount(category_breakdown(expenses))
    return category_items(rows, snapshot.categories)


@router.get("/monthly-trend", response_model=list[MonthlySpending])
def get_monthly_trend(
    year: int | None = Query(None, ge=1, le=9999),
    store: RecordStore = Depends(get_store),
):
    return monthly_trend(store.expenses.get_all(), year or date.today().year)


@router.get("/calendar", response_model=list[DaySpending])
def get_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    store: RecordStore = Depends(get_store),
):
    """Daily spending totals for one month."""
    return daily_spending(store.expenses.get_all(), year, month)


@router.get("/budget-cards", response_model=list[BudgetCard])
def get_budget_cards(
    reference_date: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    ref = reference_date_or_today(reference_date)
    try:
        return budget_cards(store.snapshot(), ref)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
