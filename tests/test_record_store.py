from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from glance.errors import DuplicateBudgetError, InvalidArgumentError, NotFoundError
from glance.periods import BudgetPeriod
from glance.schemas import BudgetCreate, CategoryCreate, ExpenseCreate
from glance.services import DEFAULT_CATEGORIES, RecordStore


def expense_data(amount="12.50", category_id="cat_food", on="2025-04-05", description="Lunch"):
    return ExpenseCreate(amount=amount, description=description, date=on, category_id=category_id)


def test_open_seeds_default_categories(store):
    categories = store.categories.get_all()

    assert [c.name for c in categories] == [
        "Housing", "Food & Dining", "Transportation", "Entertainment",
        "Healthcare", "Shopping", "Utilities", "Other",
    ]
    assert categories[0].id == "cat_housing"
    assert store.expenses.get_all() == []
    assert store.budgets.get_all() == []


def test_seeding_happens_once(store):
    assert store.initialize() is False

    for category in store.categories.get_all():
        store.categories.remove(category.id)
    assert store.initialize() is False
    assert store.categories.get_all() == []


def test_add_generates_unique_prefixed_ids(store):
    first = store.expenses.add(expense_data())
    second = store.expenses.add(expense_data())

    assert first.record.id.startswith("exp_")
    assert first.record.id != second.record.id
    assert [e.id for e in second.snapshot] == [first.record.id, second.record.id]


def test_add_returns_snapshot_matching_store(store):
    mutation = store.categories.add(CategoryCreate(name="Pets", color="bg-gray-500", icon="paw"))

    assert mutation.record.id.startswith("cat_")
    assert mutation.snapshot == store.categories.get_all()
    assert len(mutation.snapshot) == len(DEFAULT_CATEGORIES) + 1


def test_update_replaces_record(store):
    added = store.expenses.add(expense_data()).record
    mutation = store.expenses.update(added.id, expense_data(amount="20", description="Dinner"))

    assert mutation.record.id == added.id
    assert mutation.record.amount == Decimal("20")
    assert store.expenses.get(added.id).description == "Dinner"


def test_replace_uses_record_id(store):
    added = store.expenses.add(expense_data()).record
    changed = added.model_copy(update={"description": "Brunch"})

    store.expenses.replace(changed)
    assert store.expenses.get(added.id).description == "Brunch"


def test_update_missing_raises_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        store.expenses.update("exp_missing", expense_data())
    assert exc_info.value.record_id == "exp_missing"


def test_remove_missing_is_noop(store):
    store.expenses.add(expense_data())
    mutation = store.expenses.remove("exp_missing")

    assert mutation.record is None
    assert len(mutation.snapshot) == 1


def test_remove_deletes_record(store):
    added = store.expenses.add(expense_data()).record
    mutation = store.expenses.remove(added.id)

    assert mutation.snapshot == []
    assert store.expenses.get(added.id) is None


def test_deleting_category_keeps_expenses(store):
    added = store.expenses.add(expense_data(category_id="cat_food")).record
    store.categories.remove("cat_food")

    assert store.expenses.get(added.id).category_id == "cat_food"


def test_duplicate_budget_rejected(store):
    store.budgets.add(BudgetCreate(category_id="cat_food", amount="400", period=BudgetPeriod.MONTHLY))

    with pytest.raises(DuplicateBudgetError):
        store.budgets.add(BudgetCreate(category_id="cat_food", amount="500", period=BudgetPeriod.MONTHLY))

    # Same category with a different period is allowed
    store.budgets.add(BudgetCreate(category_id="cat_food", amount="100", period=BudgetPeriod.WEEKLY))
    assert len(store.budgets.get_all()) == 2


def test_duplicate_budget_is_an_invalid_argument():
    assert issubclass(DuplicateBudgetError, InvalidArgumentError)


def test_budget_update_keeps_its_own_slot(store):
    budget = store.budgets.add(BudgetCreate(category_id="cat_food", amount="400")).record
    updated = store.budgets.update(budget.id, BudgetCreate(category_id="cat_food", amount="450")).record
    assert updated.amount == Decimal("450")


def test_budget_update_into_taken_slot_rejected(store):
    store.budgets.add(BudgetCreate(category_id="cat_food", amount="400"))
    other = store.budgets.add(BudgetCreate(category_id="cat_housing", amount="1300")).record

    with pytest.raises(DuplicateBudgetError):
        store.budgets.update(other.id, BudgetCreate(category_id="cat_food", amount="1300"))


def test_records_persist_across_reopen(tmp_path):
    path = tmp_path / "book.db"
    store = RecordStore.open(path)
    added = store.expenses.add(expense_data(amount="19.99")).record
    store.close()

    reopened = RecordStore.open(path)
    try:
        loaded = reopened.expenses.get(added.id)
        assert loaded == added
        assert loaded.amount == Decimal("19.99")
        assert loaded.date == date(2025, 4, 5)
    finally:
        reopened.close()


def test_snapshot_contains_every_collection(store):
    store.expenses.add(expense_data())
    store.budgets.add(BudgetCreate(category_id="cat_food", amount="400"))
    snapshot = store.snapshot()

    assert len(snapshot.expenses) == 1
    assert len(snapshot.budgets) == 1
    assert len(snapshot.categories) == len(DEFAULT_CATEGORIES)


@pytest.mark.parametrize("amount", ["0", "-5", "1.234"])
def test_write_boundary_rejects_bad_amounts(amount):
    with pytest.raises(ValidationError):
        ExpenseCreate(amount=amount, date="2025-04-01", category_id="cat_food")
    with pytest.raises(ValidationError):
        BudgetCreate(amount=amount, category_id="cat_food")


def test_expense_date_accepts_timestamp_and_rejects_garbage(local_tz):
    local_tz("UTC")
    assert ExpenseCreate(amount="1", date="2025-04-01T08:00:00.000Z", category_id="x").date == date(2025, 4, 1)
    with pytest.raises(ValidationError):
        ExpenseCreate(amount="1", date="yesterday", category_id="x")


def test_records_are_immutable(store):
    expense = store.expenses.add(ExpenseCreate(amount="12.50", date="2025-04-01", category_id="cat_food")).record
    assert type(expense).model_config["frozen"] is True

    with pytest.raises(ValidationError):
        expense.amount = Decimal("1")
    assert store.expenses.get(expense.id).amount == Decimal("12.50")
