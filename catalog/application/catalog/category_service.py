"""
Service: Category CRUD.

Input: category ids, CategoryDTO, PageRequest
Output: CategoryDTO, list[CategoryDTO], Page[CategoryDTO]
Side effects: Writes to the category repository on insert/update/delete.
Failure cases: ResourceNotFoundError, DatabaseError.
"""

import logging

from catalog.application.catalog.dtos import CategoryDTO
from catalog.domain.catalog.entities import Category, Page, PageRequest
from catalog.domain.catalog.errors import (
    DatabaseError,
    EmptyResultError,
    EntityNotFoundError,
    IntegrityViolationError,
    ResourceNotFoundError,
)
from catalog.domain.catalog.ports import CategoryRepository

logger = logging.getLogger(__name__)

RESOURCE = "Category"


class CategoryService:
    """Orchestrates category reads and writes.

    Translates repository errors into domain errors: a missing row becomes
    ResourceNotFoundError and a rejected delete becomes DatabaseError.
    """

    def __init__(self, repository: CategoryRepository) -> None:
        self._repository = repository

    def find_all(self) -> list[CategoryDTO]:
        """Return every category, ordered by id."""
        categories = self._repository.find_all()
        logger.debug("Listed %d categories", len(categories))
        return [CategoryDTO.from_entity(c) for c in categories]

    def find_all_paged(self, page_request: PageRequest) -> Page[CategoryDTO]:
        """Return one page of categories."""
        page = self._repository.find_all_paged(page_request)
        return page.map(CategoryDTO.from_entity)

    def find_by_id(self, category_id: int) -> CategoryDTO:
        """Return a single category.

        Raises:
            ResourceNotFoundError: If no category has this id.
        """
        entity = self._repository.find_by_id(category_id)
        if entity is None:
            raise ResourceNotFoundError(RESOURCE, category_id)
        return CategoryDTO.from_entity(entity)

    def insert(self, dto: CategoryDTO) -> CategoryDTO:
        """Persist a new category; the store assigns its id."""
        try:
            entity = self._repository.save(Category(name=dto.name))
        except IntegrityViolationError as exc:
            raise DatabaseError("Integrity violation") from exc
        logger.info("Created category id=%d", entity.id)
        return CategoryDTO.from_entity(entity)

    def update(self, category_id: int, dto: CategoryDTO) -> CategoryDTO:
        """Overwrite the mutable fields of an existing category.

        Raises:
            ResourceNotFoundError: If no category has this id.
        """
        try:
            entity = self._repository.get_reference(category_id)
        except EntityNotFoundError as exc:
            raise ResourceNotFoundError(RESOURCE, category_id) from exc

        entity.name = dto.name
        try:
            entity = self._repository.save(entity)
        except IntegrityViolationError as exc:
            raise DatabaseError("Integrity violation") from exc
        logger.info("Updated category id=%d", category_id)
        return CategoryDTO.from_entity(entity)

    def delete(self, category_id: int) -> None:
        """Remove a category.

        Raises:
            ResourceNotFoundError: If no category has this id.
            DatabaseError: If products still reference the category.
        """
        try:
            self._repository.delete_by_id(category_id)
        except EmptyResultError as exc:
            raise ResourceNotFoundError(RESOURCE, category_id) from exc
        except IntegrityViolationError as exc:
            raise DatabaseError("Integrity violation") from exc
        logger.info("Deleted category id=%d", category_id)
