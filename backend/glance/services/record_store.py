"""
Record store for expenses, budgets and categories.

Each collection is persisted as a single JSON array under its own key in the
key-value store (`expenses`, `budgets`, `categories`). Writes replace the
whole array and return the new snapshot of that collection, so callers never
have to re-read the store to stay consistent.
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel

from ..database import KeyValueStore
from ..errors import DuplicateBudgetError, NotFoundError
from ..schemas import Budget, Category, Expense

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

EXPENSES_KEY = "expenses"
BUDGETS_KEY = "budgets"
CATEGORIES_KEY = "categories"

DEFAULT_CATEGORIES = [
    Category(id="cat_housing", name="Housing", color="bg-budget-purple-500", icon="home"),
    Category(id="cat_food", name="Food & Dining", color="bg-budget-green-500", icon="utensils"),
    Category(id="cat_transportation", name="Transportation", color="bg-budget-blue-500", icon="car"),
    Category(id="cat_entertainment", name="Entertainment", color="bg-budget-yellow-500", icon="film"),
    Category(id="cat_healthcare", name="Healthcare", color="bg-budget-red-500", icon="heart"),
    Category(id="cat_shopping", name="Shopping", color="bg-budget-purple-400", icon="shopping-bag"),
    Category(id="cat_utilities", name="Utilities", color="bg-budget-blue-700", icon="zap"),
    Category(id="cat_other", name="Other", color="bg-gray-500", icon="more-horizontal"),
]


@dataclass(frozen=True)
class Mutation(Generic[R]):
    """Result of a write: the affected record and the collection afterwards."""
    record: R | None
    snapshot: list[R]


@dataclass(frozen=True)
class Snapshot:
    """Full contents of every collection at one point in time."""
    expenses: list[Expense]
    budgets: list[Budget]
    categories: list[Category]


class Collection(Generic[R]):
    """CRUD over one entity type stored as a JSON array."""

    def __init__(
        self,
        kv: KeyValueStore,
        key: str,
        record_type: type[R],
        id_prefix: str,
        lock: threading.RLock,
    ):
        self.kv = kv
        self.key = key
        self.record_type = record_type
        self.id_prefix = id_prefix
        self._lock = lock

    @property
    def entity_name(self) -> str:
        return self.record_type.__name__

    def get_all(self) -> list[R]:
        return [self.record_type.model_validate(item) for item in self.kv.get(self.key, [])]

    def get(self, record_id: str) -> R | None:
        for record in self.get_all():
            if record.id == record_id:
                return record
        return None

    def _save(self, records: list[R]) -> None:
        self.kv.set(self.key, [r.model_dump(mode="json") for r in records])

    def _new_id(self, records: list[R]) -> str:
        existing = {r.id for r in records}
        while True:
            candidate = f"{self.id_prefix}_{uuid.uuid4().hex[:12]}"
            if candidate not in existing:
                return candidate

    def _check(self, records: list[R], candidate: R) -> None:
        """Hook for write-time constraints across the collection."""

    def add(self, data: BaseModel) -> Mutation[R]:
        """Store a new record with a generated id."""
        with self._lock:
            records = self.get_all()
            record = self.record_type(id=self._new_id(records), **data.model_dump(exclude={"id"}))
            self._check(records, record)
            records.append(record)
            self._save(records)
        logger.debug("Added %s %s", self.entity_name, record.id)
        return Mutation(record=record, snapshot=records)

    def update(self, record_id: str, data: BaseModel) -> Mutation[R]:
        """
        Replace a record in full.

        Raises NotFoundError if no record has that id.
        """
        with self._lock:
            records = self.get_all()
            index = next((i for i, r in enumerate(records) if r.id == record_id), None)
            if index is None:
                logger.warning("Update of missing %s %s", self.entity_name, record_id)
                raise NotFoundError(self.entity_name, record_id)

            record = self.record_type(id=record_id, **data.model_dump(exclude={"id"}))
            others = records[:index] + records[index + 1:]
            self._check(others, record)
            records[index] = record
            self._save(records)
        logger.debug("Updated %s %s", self.entity_name, record_id)
        return Mutation(record=record, snapshot=records)

    def replace(self, record: R) -> Mutation[R]:
        """Update using the id carried by the record itself."""
        return self.update(record.id, record)

    def remove(self, record_id: str) -> Mutation[R]:
        """Delete a record. Deleting a missing id is a no-op."""
        with self._lock:
            records = self.get_all()
            remaining = [r for r in records if r.id != record_id]
            if len(remaining) != len(records):
                self._save(remaining)
                logger.debug("Removed %s %s", self.entity_name, record_id)
        return Mutation(record=None, snapshot=remaining)


class BudgetCollection(Collection[Budget]):
    """Budgets, unique per (category, period)."""

    def _check(self, records: list[Budget], candidate: Budget) -> None:
        for existing in records:
            if existing.category_id == candidate.category_id and existing.period == candidate.period:
                raise DuplicateBudgetError(candidate.category_id, candidate.period.value)


class RecordStore:
    """Handle on the persisted expenses, budgets and categories."""

    def __init__(self, kv: KeyValueStore):
        self.kv = kv
        self._lock = threading.RLock()
        self.expenses: Collection[Expense] = Collection(kv, EXPENSES_KEY, Expense, "exp", self._lock)
        self.budgets: Collection[Budget] = BudgetCollection(kv, BUDGETS_KEY, Budget, "bud", self._lock)
        self.categories: Collection[Category] = Collection(
            kv, CATEGORIES_KEY, Category, "cat", self._lock
        )

    @classmethod
    def open(cls, db_path: Path) -> "RecordStore":
        """Open the store file and run first-time initialization."""
        kv = KeyValueStore(db_path)
        kv.open()
        store = cls(kv)
        store.initialize()
        return store

    def close(self) -> None:
        self.kv.close()

    def initialize(self, default_categories: list[Category] | None = None) -> bool:
        """
        Create empty collections and seed default categories.

        Only keys that have never been written are touched, so the defaults
        are loaded exactly once: a user who later deletes every category is
        not re-seeded. Returns True if categories were seeded.
        """
        if default_categories is None:
            default_categories = DEFAULT_CATEGORIES

        with self._lock:
            for key in (EXPENSES_KEY, BUDGETS_KEY):
                if not self.kv.contains(key):
                    self.kv.set(key, [])

            if self.kv.contains(CATEGORIES_KEY):
                return False
            self.kv.set(CATEGORIES_KEY, [c.model_dump(mode="json") for c in default_categories])

        logger.info("Seeded %d default categories", len(default_categories))
        return True

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot(
                expenses=self.expenses.get_all(),
                budgets=self.budgets.get_all(),
                categories=self.categories.get_all(),
            )
