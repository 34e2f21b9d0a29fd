from fastapi import APIRouter, Depends, HTTPException, Query

from ..errors import DuplicateBudgetError, InvalidArgumentError, NotFoundError
from ..schemas import Budget, BudgetCreate, BudgetUtilization
from ..services import RecordStore, current_budget_utilization
from .deps import get_store, reference_date_or_today

router = APIRouter()


@router.get("/", response_model=list[Budget])
def list_budgets(store: RecordStore = Depends(get_store)):
    return store.budgets.get_all()


@router.get("/{budget_id}", response_model=Budget)
def get_budget(budget_id: str, store: RecordStore = Depends(get_store)):
    budget = store.budgets.get(budget_id)
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return budget


@router.post("/", response_model=Budget, status_code=201)
def create_budget(data: BudgetCreate, store: RecordStore = Depends(get_store)):
    try:
        return store.budgets.add(data).record
    except DuplicateBudgetError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{budget_id}", response_model=Budget)
def update_budget(budget_id: str, data: BudgetCreate, store: RecordStore = Depends(get_store)):
    try:
        return store.budgets.update(budget_id, data).record
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Budget not found")
    except DuplicateBudgetError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{budget_id}", status_code=204)
def delete_budget(budget_id: str, store: RecordStore = Depends(get_store)):
    store.budgets.remove(budget_id)
    return None


@router.get("/{budget_id}/utilization", response_model=BudgetUtilization)
def budget_utilization(
    budget_id: str,
    reference_date: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    """Spending against a budget over its period containing reference_date."""
    budget = store.budgets.get(budget_id)
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")

    ref = reference_date_or_today(reference_date)
    try:
        return current_budget_utilization(budget, store.expenses.get_all(), ref)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
