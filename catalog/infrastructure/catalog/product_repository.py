"""
Adapter: Product repository.

Implements ProductRepository port on tb_product.
A product owns its rows in tb_product_category: saving a product replaces
them, deleting a product removes them first.
"""

from collections import defaultdict
from typing import Any

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Row

from catalog.domain.catalog.entities import Category, Product
from catalog.domain.catalog.ports import ProductRepository
from catalog.infrastructure.catalog.base_repository import SqlAlchemyCrudRepository
from catalog.infrastructure.catalog.database import (
    category_table,
    product_category_table,
    product_table,
)


class ProductRepositoryAdapter(SqlAlchemyCrudRepository[Product], ProductRepository):
    """SQLAlchemy implementation of the product repository."""

    table = product_table
    entity_name = "Product"

    def _to_entity(self, row: Row) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            img_url=row.img_url,
            date=row.date,
        )

    def _to_values(self, entity: Product) -> dict[str, Any]:
        return {
            "name": entity.name,
            "description": entity.description,
            "price": entity.price,
            "img_url": entity.img_url,
            "date": entity.date,
        }

    def _load_associations(self, entities: list[Product]) -> None:
        by_id = {product.id: product for product in entities}
        query = (
            select(
                product_category_table.c.product_id,
                category_table.c.id,
                category_table.c.name,
            )
            .join(category_table, category_table.c.id == product_category_table.c.category_id)
            .where(product_category_table.c.product_id.in_(by_id))
            .order_by(category_table.c.id)
        )
        categories: dict[int, list[Category]] = defaultdict(list)
        for row in self._conn.execute(query):
            categories[row.product_id].append(Category(id=row.id, name=row.name))
        for product_id, product in by_id.items():
            product.categories = categories[product_id]

    def _save_associations(self, entity: Product) -> None:
        self._delete_associations(entity.id)
        if entity.categories:
            self._execute(
                insert(product_category_table),
                [
                    {"product_id": entity.id, "category_id": category.id}
                    for category in entity.categories
                ],
            )

    def _delete_associations(self, entity_id: int) -> None:
        self._execute(
            delete(product_category_table).where(
                product_category_table.c.product_id == entity_id
            )
        )
