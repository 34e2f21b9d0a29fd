import datetime as dt
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..periods import parse_date


class ExpenseBase(BaseModel):
    """Base expense fields."""
    amount: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    description: str = ""
    date: dt.date
    category_id: str

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        # Accept full ISO timestamps as sent by browser date pickers
        return parse_date(value)


class ExpenseCreate(ExpenseBase):
    """Fields for creating or replacing an expense."""
    pass


class Expense(ExpenseBase):
    """A stored expense."""
    id: str

    model_config = ConfigDict(frozen=True)
