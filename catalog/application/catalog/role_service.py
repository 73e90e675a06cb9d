"""
Service: Role lookups.

Roles are reference data; they are created by seeding and only read
through the API.
"""

from catalog.application.catalog.dtos import RoleDTO
from catalog.domain.catalog.errors import ResourceNotFoundError
from catalog.domain.catalog.ports import RoleRepository


class RoleService:
    """Read-only access to roles."""

    def __init__(self, repository: RoleRepository) -> None:
        self._repository = repository

    def find_all(self) -> list[RoleDTO]:
        return [RoleDTO.from_entity(r) for r in self._repository.find_all()]

    def find_by_id(self, role_id: int) -> RoleDTO:
        entity = self._repository.find_by_id(role_id)
        if entity is None:
            raise ResourceNotFoundError("Role", role_id)
        return RoleDTO.from_entity(entity)
