"""
Adapter: generic SQLAlchemy CRUD repository.

Implements the CrudRepository port once for every table with an integer
``id`` primary key. Concrete adapters supply the row/entity mapping and,
where the entity owns a many-to-many association, how to load and store it.

Adapters work on a Connection that is already inside a transaction; the
caller owns commit and rollback.
"""

import logging
from abc import abstractmethod
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.engine import Connection, Row
from sqlalchemy.exc import IntegrityError

from catalog.domain.catalog.entities import Page, PageRequest, SortDirection
from catalog.domain.catalog.errors import (
    EmptyResultError,
    EntityNotFoundError,
    IntegrityViolationError,
    InvalidSortPropertyError,
)
from catalog.domain.catalog.ports import CrudRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyCrudRepository(CrudRepository[T], Generic[T]):
    """Default CRUD operations over a single SQLAlchemy Core table."""

    table: Table
    entity_name: str
    unsortable_columns: frozenset[str] = frozenset()

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    @abstractmethod
    def _to_entity(self, row: Row) -> T:
        """Map a table row to a domain entity (associations not loaded)."""

    @abstractmethod
    def _to_values(self, entity: T) -> dict[str, Any]:
        """Map an entity to column values, excluding ``id``."""

    def _load_associations(self, entities: list[T]) -> None:
        """Populate many-to-many collections of already-mapped entities."""

    def _save_associations(self, entity: T) -> None:
        """Replace the stored many-to-many rows of a persisted entity."""

    def _delete_associations(self, entity_id: int) -> None:
        """Remove association rows owned by the entity before deleting it."""

    def _execute(self, statement, parameters=None):
        try:
            return self._conn.execute(statement, parameters)
        except IntegrityError as exc:
            logger.warning("Integrity violation on %s: %s", self.table.name, exc.orig)
            raise IntegrityViolationError(str(exc.orig)) from exc

    def _fetch(self, statement) -> list[T]:
        rows = self._conn.execute(statement).fetchall()
        entities = [self._to_entity(row) for row in rows]
        if entities:
            self._load_associations(entities)
        return entities

    def save(self, entity: T) -> T:
        values = self._to_values(entity)
        if entity.id is None:
            result = self._execute(insert(self.table).values(**values))
            entity.id = result.inserted_primary_key[0]
            logger.debug("Inserted %s id=%d", self.entity_name, entity.id)
        else:
            self._execute(
                update(self.table).where(self.table.c.id == entity.id).values(**values)
            )
            logger.debug("Updated %s id=%d", self.entity_name, entity.id)
        self._save_associations(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[T]:
        entities = self._fetch(select(self.table).where(self.table.c.id == entity_id))
        return entities[0] if entities else None

    def get_reference(self, entity_id: int) -> T:
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    def exists_by_id(self, entity_id: int) -> bool:
        query = select(func.count()).select_from(self.table).where(self.table.c.id == entity_id)
        return self._conn.execute(query).scalar_one() > 0

    def find_all(self) -> list[T]:
        return self._fetch(select(self.table).order_by(self.table.c.id))

    def find_all_paged(self, page_request: PageRequest) -> Page[T]:
        if (
            page_request.sort not in self.table.c
            or page_request.sort in self.unsortable_columns
        ):
            raise InvalidSortPropertyError(page_request.sort)

        column = self.table.c[page_request.sort]
        order = column.desc() if page_request.direction is SortDirection.DESC else column.asc()
        query = (
            select(self.table)
            .order_by(order, self.table.c.id)
            .limit(page_request.size)
            .offset(page_request.offset)
        )
        return Page(
            content=self._fetch(query),
            page=page_request.page,
            size=page_request.size,
            total_elements=self.count(),
        )

    def delete_by_id(self, entity_id: int) -> None:
        if not self.exists_by_id(entity_id):
            raise EmptyResultError(self.entity_name, entity_id)
        self._delete_associations(entity_id)
        self._execute(delete(self.table).where(self.table.c.id == entity_id))
        logger.debug("Deleted %s id=%d", self.entity_name, entity_id)

    def count(self) -> int:
        return self._conn.execute(select(func.count()).select_from(self.table)).scalar_one()
