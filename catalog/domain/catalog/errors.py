"""
Domain-specific errors for the catalog bounded context.

Two families live here:

- Repository errors, raised by storage adapters when the store reports a
  missing row or an integrity violation.
- Domain errors, raised by the application services after translating
  repository errors. These are mapped to HTTP responses at the interface
  layer.

No framework imports allowed.
"""


class RepositoryError(Exception):
    """Base error for failures reported by a repository adapter."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EntityNotFoundError(RepositoryError):
    """Raised when a reference is requested for an id with no row."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"Unable to find {entity} with id {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class EmptyResultError(RepositoryError):
    """Raised when deleting an id that matches no row."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"No {entity} entity with id {entity_id} exists")
        self.entity = entity
        self.entity_id = entity_id


class IntegrityViolationError(RepositoryError):
    """Raised when the store rejects a write on a constraint (FK, unique)."""


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ResourceNotFoundError(CatalogDomainError):
    """Raised when the requested resource id does not exist."""

    def __init__(self, resource: str, resource_id: int) -> None:
        super().__init__(f"{resource} not found: id {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(CatalogDomainError):
    """Raised when a write conflicts with existing data.

    Typically a delete of a row that other rows still reference, or an
    insert that breaks a uniqueness constraint.
    """


class InvalidSortPropertyError(CatalogDomainError):
    """Raised when a paged read asks to sort on an unknown property."""

    def __init__(self, sort: str) -> None:
        super().__init__(f"Invalid sort property: {sort}")
        self.sort = sort
