# SPDX-License-Identifier: MIT

from typing import Optional

from taskmenu.model.category import DEFAULT_CATEGORIES


class CategoryRepository:
    """Ordered set of category labels, in order of first insertion."""

    def __init__(self, categories: Optional[list[str]] = None) -> None:
        if categories is None:
            categories = DEFAULT_CATEGORIES
        self._categories: list[str] = list(dict.fromkeys(categories))

    def add_category(self, category: str) -> bool:
        if category in self._categories:
            return False
        self._categories.append(category)
        return True

    def get_all_categories(self) -> list[str]:
        return list(self._categories)

    def category_exists(self, category: str) -> bool:
        return category in self._categories
