"""Category lookup for transactions and budgets."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    color: str
    type: str  # income, expense or both


DEFAULT_CATEGORIES: Tuple[Category, ...] = (
    Category("food", "Food & Dining", "#38B2AC", "expense"),
    Category("transportation", "Transportation", "#4299E1", "expense"),
    Category("utilities", "Utilities", "#9F7AEA", "expense"),
    Category("entertainment", "Entertainment", "#ED8936", "expense"),
    Category("shopping", "Shopping", "#F56565", "expense"),
    Category("health", "Health", "#48BB78", "expense"),
    Category("housing", "Housing", "#805AD5", "expense"),
    Category("salary", "Salary", "#38A169", "income"),
    Category("freelance", "Freelance", "#68D391", "income"),
    Category("gifts", "Gifts", "#4FD1C5", "income"),
    Category("other_income", "Other Income", "#81E6D9", "income"),
    Category("other_expense", "Other Expense", "#CBD5E0", "expense"),
)

_BY_ID = {category.id: category for category in DEFAULT_CATEGORIES}


def find_category(category_id: str) -> Optional[Category]:
    """Look up a category by id. Returns None for unknown ids."""
    return _BY_ID.get(category_id)


def category_display_name(category_id: str) -> str:
    """Display name for a category id, or the raw id when unknown."""
    category = find_category(category_id)
    return category.name if category else category_id
