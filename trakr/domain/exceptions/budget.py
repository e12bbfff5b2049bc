"""Budget-related domain exceptions."""

from .base import TrakrException


class BudgetNotFoundException(TrakrException):
    """Raised when a budget cannot be found."""

    def __init__(self, budget_id: str):
        super().__init__(
            message=f"Budget not found: {budget_id}",
            code="BUDGET_NOT_FOUND",
        )
        self.budget_id = budget_id


class InvalidBudgetException(TrakrException):
    """Raised when a budget has a non-positive amount or inverted dates."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_BUDGET",
        )
