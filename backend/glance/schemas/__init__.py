from .category import CategoryBase, CategoryCreate, Category
from .expense import ExpenseBase, ExpenseCreate, Expense
from .budget import BudgetBase, BudgetCreate, Budget, BudgetPeriod
from .report import (
    UtilizationLevel,
    CategorySpending,
    CategorySpendingItem,
    MonthlySpending,
    DaySpending,
    BudgetUtilization,
    BudgetSummary,
    BudgetCard,
    TransactionItem,
    Dashboard,
)

__all__ = [
    "CategoryBase",
    "CategoryCreate",
    "Category",
    "ExpenseBase",
    "ExpenseCreate",
    "Expense",
    "BudgetBase",
    "BudgetCreate",
    "Budget",
    "BudgetPeriod",
    "UtilizationLevel",
    "CategorySpending",
    "CategorySpendingItem",
    "MonthlySpending",
    "DaySpending",
    "BudgetUtilization",
    "BudgetSummary",
    "BudgetCard",
    "TransactionItem",
    "Dashboard",
]
