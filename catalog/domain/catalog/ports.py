"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from catalog.domain.catalog.entities import (
    Category,
    Page,
    PageRequest,
    Product,
    Role,
    User,
)

T = TypeVar("T")


class CrudRepository(ABC, Generic[T]):
    """Generic create/read/update/delete contract shared by all entities."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert the entity when its id is None, update it otherwise.

        Returns:
            The persisted entity, with its id assigned.

        Raises:
            IntegrityViolationError: If the store rejects the write.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with the given id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_reference(self, entity_id: int) -> T:
        """Return the entity with the given id.

        Raises:
            EntityNotFoundError: If no row matches the id.
        """
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, entity_id: int) -> bool:
        """Return True if a row with the given id exists."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """Return every entity, ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def find_all_paged(self, page_request: PageRequest) -> Page[T]:
        """Return one page of entities.

        Raises:
            InvalidSortPropertyError: If the sort property is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> None:
        """Delete the entity with the given id.

        Raises:
            EmptyResultError: If no row matches the id.
            IntegrityViolationError: If other rows still reference it.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored entities."""
        raise NotImplementedError


class CategoryRepository(CrudRepository[Category]):
    """Port for persisting and retrieving categories."""


class ProductRepository(CrudRepository[Product]):
    """Port for persisting and retrieving products with their categories."""


class RoleRepository(CrudRepository[Role]):
    """Port for persisting and retrieving roles."""


class UserRepository(CrudRepository[User]):
    """Port for persisting and retrieving users with their roles."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with the given email, or None if not found."""
        raise NotImplementedError
