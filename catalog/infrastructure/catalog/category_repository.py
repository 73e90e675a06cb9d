"""
Adapter: Category repository.

Implements CategoryRepository port on the tb_category table.
"""

from typing import Any

from sqlalchemy.engine import Row

from catalog.domain.catalog.entities import Category
from catalog.domain.catalog.ports import CategoryRepository
from catalog.infrastructure.catalog.base_repository import SqlAlchemyCrudRepository
from catalog.infrastructure.catalog.database import category_table


class CategoryRepositoryAdapter(SqlAlchemyCrudRepository[Category], CategoryRepository):
    """SQLAlchemy implementation of the category repository."""

    table = category_table
    entity_name = "Category"

    def _to_entity(self, row: Row) -> Category:
        return Category(id=row.id, name=row.name)

    def _to_values(self, entity: Category) -> dict[str, Any]:
        return {"name": entity.name}
