"""
Adapter: Role repository.

Implements RoleRepository port on the tb_role table.
"""

from typing import Any

from sqlalchemy.engine import Row

from catalog.domain.catalog.entities import Role
from catalog.domain.catalog.ports import RoleRepository
from catalog.infrastructure.catalog.base_repository import SqlAlchemyCrudRepository
from catalog.infrastructure.catalog.database import role_table


class RoleRepositoryAdapter(SqlAlchemyCrudRepository[Role], RoleRepository):
    """SQLAlchemy implementation of the role repository."""

    table = role_table
    entity_name = "Role"

    def _to_entity(self, row: Row) -> Role:
        return Role(id=row.id, authority=row.authority)

    def _to_values(self, entity: Role) -> dict[str, Any]:
        return {"authority": entity.authority}
