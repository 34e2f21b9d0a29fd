from fastapi import APIRouter, Depends, HTTPException, Query

from ..errors import NotFoundError
from ..schemas import Expense, ExpenseCreate, TransactionItem
from ..services import RecordStore, search_expenses, transaction_items
from .deps import get_store

router = APIRouter()


@router.get("/", response_model=list[TransactionItem])
def list_expenses(
    search: str = Query(""),
    category_id: str | None = Query(None),
    store: RecordStore = Depends(get_store),
):
    """
    Get the expense ledger, newest first.

    `search` matches the description case-insensitively; `category_id`
    restricts to one category.
    """
    snapshot = store.snapshot()
    matches = search_expenses(snapshot.expenses, search=search, category_id=category_id)
    return transaction_items(matches, snapshot.categories)


@router.get("/{expense_id}", response_model=Expense)
def get_expense(expense_id: str, store: RecordStore = Depends(get_store)):
    """Get a single expense by ID."""
    expense = store.expenses.get(expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense


@router.post("/", response_model=Expense, status_code=201)
def create_expense(expense: ExpenseCreate, store: RecordStore = Depends(get_store)):
    """Record a new expense."""
    return store.expenses.add(expense).record


@router.put("/{expense_id}", response_model=Expense)
def update_expense(
    expense_id: str,
    expense: ExpenseCreate,
    store: RecordStore = Depends(get_store)
):
    """Replace an expense."""
    try:
        return store.expenses.update(expense_id, expense).record
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Expense not found")


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: str, store: RecordStore = Depends(get_store)):
    """Delete an expense. Unknown ids are ignored."""
    store.expenses.remove(expense_id)
    return None
