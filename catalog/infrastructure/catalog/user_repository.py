"""
Adapter: User repository.

Implements UserRepository port on tb_user.
A user owns its rows in tb_user_role. The password column is never
available for sorting.
"""

from collections import defaultdict
from typing import Any, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Row

from catalog.domain.catalog.entities import Role, User
from catalog.domain.catalog.ports import UserRepository
from catalog.infrastructure.catalog.base_repository import SqlAlchemyCrudRepository
from catalog.infrastructure.catalog.database import role_table, user_role_table, user_table


class UserRepositoryAdapter(SqlAlchemyCrudRepository[User], UserRepository):
    """SQLAlchemy implementation of the user repository."""

    table = user_table
    entity_name = "User"
    unsortable_columns = frozenset({"password"})

    def _to_entity(self, row: Row) -> User:
        return User(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            password=row.password,
        )

    def _to_values(self, entity: User) -> dict[str, Any]:
        return {
            "first_name": entity.first_name,
            "last_name": entity.last_name,
            "email": entity.email,
            "password": entity.password,
        }

    def find_by_email(self, email: str) -> Optional[User]:
        users = self._fetch(select(user_table).where(user_table.c.email == email))
        return users[0] if users else None

    def _load_associations(self, entities: list[User]) -> None:
        by_id = {user.id: user for user in entities}
        query = (
            select(user_role_table.c.user_id, role_table.c.id, role_table.c.authority)
            .join(role_table, role_table.c.id == user_role_table.c.role_id)
            .where(user_role_table.c.user_id.in_(by_id))
            .order_by(role_table.c.id)
        )
        roles: dict[int, list[Role]] = defaultdict(list)
        for row in self._conn.execute(query):
            roles[row.user_id].append(Role(id=row.id, authority=row.authority))
        for user_id, user in by_id.items():
            user.roles = roles[user_id]

    def _save_associations(self, entity: User) -> None:
        self._delete_associations(entity.id)
        if entity.roles:
            self._execute(
                insert(user_role_table),
                [{"user_id": entity.id, "role_id": role.id} for role in entity.roles],
            )

    def _delete_associations(self, entity_id: int) -> None:
        self._execute(delete(user_role_table).where(user_role_table.c.user_id == entity_id))
