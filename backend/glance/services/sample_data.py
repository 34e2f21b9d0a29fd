"""Demo expenses and budgets for trying the app on an empty store."""

import logging
from datetime import date
from decimal import Decimal

from ..periods import BudgetPeriod
from ..schemas import BudgetCreate, ExpenseCreate
from .record_store import RecordStore

logger = logging.getLogger(__name__)

# (amount, description, day of month, category id)
SAMPLE_EXPENSES = [
    ("1200", "Rent", 1, "cat_housing"),
    ("85", "Grocery shopping", 5, "cat_food"),
    ("45", "Gas", 8, "cat_transportation"),
    ("35", "Movie tickets", 10, "cat_entertainment"),
    ("120", "New clothes", 12, "cat_shopping"),
    ("95", "Electric bill", 15, "cat_utilities"),
    ("60", "Medicine", 18, "cat_healthcare"),
    ("25", "Haircut", 20, "cat_other"),
    ("75", "Dinner out", 22, "cat_food"),
    ("40", "Uber rides", 23, "cat_transportation"),
]

SAMPLE_BUDGETS = [
    ("cat_housing", "1300"),
    ("cat_food", "400"),
    ("cat_transportation", "200"),
    ("cat_entertainment", "150"),
    ("cat_shopping", "200"),
    ("cat_utilities", "150"),
    ("cat_healthcare", "100"),
    ("cat_other", "100"),
]


def load_sample_data(store: RecordStore, month: date) -> int:
    """
    Add the demo expenses in the given month and a monthly budget per
    default category. Skipped if the store already has expenses.

    Returns the number of expenses added.
    """
    if store.expenses.get_all():
        logger.info("Store already has expenses; sample data not loaded")
        return 0

    for amount, description, day, category_id in SAMPLE_EXPENSES:
        store.expenses.add(ExpenseCreate(
            amount=Decimal(amount),
            description=description,
            date=month.replace(day=day),
            category_id=category_id,
        ))

    existing = {(b.category_id, b.period) for b in store.budgets.get_all()}
    for category_id, amount in SAMPLE_BUDGETS:
        if (category_id, BudgetPeriod.MONTHLY) in existing:
            continue
        store.budgets.add(BudgetCreate(
            category_id=category_id,
            amount=Decimal(amount),
            period=BudgetPeriod.MONTHLY,
        ))

    logger.info("Loaded %d sample expenses", len(SAMPLE_EXPENSES))
    return len(SAMPLE_EXPENSES)
