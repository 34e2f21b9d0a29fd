import time
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from glance.config import Settings
from glance.main import create_app
from glance.periods import BudgetPeriod
from glance.schemas import Budget, Category, Expense
from glance.services import RecordStore


def make_expense(amount, category_id="1", on="2025-04-01", id=None, description=""):
    return Expense(
        id=id or f"exp_{category_id}_{on}_{amount}",
        amount=Decimal(str(amount)),
        description=description,
        date=on,
        category_id=category_id,
    )


def make_budget(amount, category_id="1", period=BudgetPeriod.MONTHLY, id=None):
    return Budget(
        id=id or f"bud_{category_id}_{period.value}",
        category_id=category_id,
        amount=Decimal(str(amount)),
        period=period,
    )


@pytest.fixture
def categories():
    return [
        Category(id="1", name="Housing", color="budget-purple-400", icon="home"),
        Category(id="2", name="Food", color="budget-green-500", icon="utensils"),
    ]


@pytest.fixture
def april_expenses():
    return [
        make_expense(1200, "1", "2025-04-01", id="e1", description="Rent"),
        make_expense(85, "2", "2025-04-05", id="e2", description="Grocery shopping"),
    ]


@pytest.fixture
def store(tmp_path):
    store = RecordStore.open(tmp_path / "glance.db")
    yield store
    store.close()


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(data_dir=tmp_path))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def today():
    return date(2025, 4, 25)


@pytest.fixture
def local_tz(monkeypatch):
    """Pin the process timezone, e.g. `local_tz("Europe/Berlin")`."""
    def pin(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield pin
    monkeypatch.undo()
    time.tzset()
