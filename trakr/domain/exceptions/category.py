"""Category-related domain exceptions."""

from .base import TrakrException


class CategoryNotFoundException(TrakrException):
    """Raised when a category id is not in the lookup."""

    def __init__(self, category_id: str):
        super().__init__(
            message=f"Category not found: {category_id}",
            code="CATEGORY_NOT_FOUND",
        )
        self.category_id = category_id
