"""
Service: User CRUD.

Input: user ids, UserInsertDTO, UserDTO, PageRequest
Output: UserDTO, Page[UserDTO]
Side effects: Writes users and their role links; hashes passwords on insert.
Failure cases: ResourceNotFoundError (user or referenced role), DatabaseError
    (duplicate email or rejected delete).
"""

import logging

from catalog.application.catalog.dtos import UserDTO, UserInsertDTO
from catalog.domain.catalog.entities import Page, PageRequest, User
from catalog.domain.catalog.errors import (
    DatabaseError,
    EmptyResultError,
    EntityNotFoundError,
    IntegrityViolationError,
    ResourceNotFoundError,
)
from catalog.domain.catalog.ports import RoleRepository, UserRepository
from catalog.shared.security.passwords import hash_password

logger = logging.getLogger(__name__)

RESOURCE = "User"


class UserService:
    """Orchestrates user reads and writes.

    The password is hashed on insert and is never part of a returned DTO.
    Updates keep the stored password.
    """

    def __init__(self, repository: UserRepository, role_repository: RoleRepository) -> None:
        self._repository = repository
        self._role_repository = role_repository

    def find_all(self) -> list[UserDTO]:
        return [UserDTO.from_entity(u) for u in self._repository.find_all()]

    def find_all_paged(self, page_request: PageRequest) -> Page[UserDTO]:
        page = self._repository.find_all_paged(page_request)
        return page.map(UserDTO.from_entity)

    def find_by_id(self, user_id: int) -> UserDTO:
        """Return a single user.

        Raises:
            ResourceNotFoundError: If no user has this id.
        """
        entity = self._repository.find_by_id(user_id)
        if entity is None:
            raise ResourceNotFoundError(RESOURCE, user_id)
        return UserDTO.from_entity(entity)

    def insert(self, dto: UserInsertDTO) -> UserDTO:
        """Persist a new user with a hashed password.

        Raises:
            ResourceNotFoundError: If a referenced role does not exist.
            DatabaseError: If the email is already taken.
        """
        entity = User(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            password=hash_password(dto.password),
        )
        entity.roles = self._resolve_roles(dto.roles)
        entity = self._save(entity)
        logger.info("Created user id=%d", entity.id)
        return UserDTO.from_entity(entity)

    def update(self, user_id: int, dto: UserDTO) -> UserDTO:
        """Overwrite the profile fields and role links of an existing user.

        Raises:
            ResourceNotFoundError: If the user or a referenced role does not exist.
            DatabaseError: If the new email is already taken.
        """
        try:
            entity = self._repository.get_reference(user_id)
        except EntityNotFoundError as exc:
            raise ResourceNotFoundError(RESOURCE, user_id) from exc

        entity.first_name = dto.first_name
        entity.last_name = dto.last_name
        entity.email = dto.email
        entity.roles = self._resolve_roles(dto.roles)
        entity = self._save(entity)
        logger.info("Updated user id=%d", user_id)
        return UserDTO.from_entity(entity)

    def delete(self, user_id: int) -> None:
        """Remove a user and its role links.

        Raises:
            ResourceNotFoundError: If no user has this id.
            DatabaseError: If other rows still reference the user.
        """
        try:
            self._repository.delete_by_id(user_id)
        except EmptyResultError as exc:
            raise ResourceNotFoundError(RESOURCE, user_id) from exc
        except IntegrityViolationError as exc:
            raise DatabaseError("Integrity violation") from exc
        logger.info("Deleted user id=%d", user_id)

    def _save(self, entity: User) -> User:
        try:
            return self._repository.save(entity)
        except IntegrityViolationError as exc:
            raise DatabaseError("Integrity violation") from exc

    def _resolve_roles(self, roles):
        resolved = []
        for role_id in dict.fromkeys(r.id for r in roles):
            try:
                resolved.append(self._role_repository.get_reference(role_id))
            except EntityNotFoundError as exc:
                raise ResourceNotFoundError("Role", role_id) from exc
        return resolved
