from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

from ..periods import BudgetPeriod


class BudgetBase(BaseModel):
    """Base budget fields."""
    category_id: str
    amount: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    period: BudgetPeriod = BudgetPeriod.MONTHLY


class BudgetCreate(BudgetBase):
    """Fields for creating or replacing a budget."""
    pass


class Budget(BudgetBase):
    """A stored budget."""
    id: str

    model_config = ConfigDict(frozen=True)
