"""
Repository for Category records.
"""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from ..models.category import Category
from ..schemas.catalog import CategorySchema
from .base import BaseRepository


class CategoryRepository(BaseRepository):
    model = Category
    schema = CategorySchema

    def get_all_categories(self) -> List[CategorySchema]:
        return self._list()

    def get_categories_by_name(self, name: str) -> List[CategorySchema]:
        return self._search(Category.name, name)

    def get_category(self, category_id: int) -> Optional[CategorySchema]:
        return self._get_by_id(category_id)

    def get_category_with_books(self, category_id: int) -> Optional[CategorySchema]:
        return self._get_by_id(category_id, options=(selectinload(Category.books),))

    def add_category(self, category: CategorySchema) -> CategorySchema:
        return self._add(category)

    def update_category(self, category: CategorySchema) -> bool:
        return self._overwrite(category)

    def delete_category(self, category: CategorySchema) -> bool:
        return self._delete(category.id)
