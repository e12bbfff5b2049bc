"""Category service - the fixed category lookup."""

from typing import List

from trakr.domain.entities import DEFAULT_CATEGORIES, Category, find_category
from trakr.domain.exceptions import CategoryNotFoundException


class CategoryService:
    """Read-only access to the category lookup."""

    def list_categories(self, category_type: str | None = None) -> List[Category]:
        """All categories, optionally only those of one type (income or expense)."""
        if category_type is None:
            return list(DEFAULT_CATEGORIES)
        return [c for c in DEFAULT_CATEGORIES if c.type in (category_type, "both")]

    def get_category(self, category_id: str) -> Category:
        """
        Look up one category.

        Raises:
            CategoryNotFoundException: If the id is not in the lookup
        """
        category = find_category(category_id)
        if category is None:
            raise CategoryNotFoundException(category_id)
        return category
