"""
Service: Product CRUD.

Input: product ids, ProductDTO, PageRequest
Output: ProductDTO, list[ProductDTO], Page[ProductDTO]
Side effects: Writes products and their category links on insert/update/delete.
Failure cases: ResourceNotFoundError (product or referenced category), DatabaseError.
"""

import logging

from catalog.application.catalog.dtos import ProductDTO
from catalog.domain.catalog.entities import Page, PageRequest, Product
from catalog.domain.catalog.errors import (
    DatabaseError,
    EmptyResultError,
    EntityNotFoundError,
    IntegrityViolationError,
    ResourceNotFoundError,
)
from catalog.domain.catalog.ports import CategoryRepository, ProductRepository

logger = logging.getLogger(__name__)

RESOURCE = "Product"


class ProductService:
    """Orchestrates product reads and writes.

    Category links are resolved through the category repository, so a
    product can only reference categories that exist.
    """

    def __init__(
        self,
        repository: ProductRepository,
        category_repository: CategoryRepository,
    ) -> None:
        self._repository = repository
        self._category_repository = category_repository

    def find_all(self) -> list[ProductDTO]:
        return [ProductDTO.from_entity(p) for p in self._repository.find_all()]

    def find_all_paged(self, page_request: PageRequest) -> Page[ProductDTO]:
        """Return one page of products, delegating paging to the repository."""
        page = self._repository.find_all_paged(page_request)
        logger.debug(
            "Paged products: page=%d size=%d total=%d",
            page.page,
            page.size,
            page.total_elements,
        )
        return page.map(ProductDTO.from_entity)

    def find_by_id(self, product_id: int) -> ProductDTO:
        """Return a single product with its categories.

        Raises:
            ResourceNotFoundError: If no product has this id.
        """
        entity = self._repository.find_by_id(product_id)
        if entity is None:
            raise ResourceNotFoundError(RESOURCE, product_id)
        return ProductDTO.from_entity(entity)

    def insert(self, dto: ProductDTO) -> ProductDTO:
        """Persist a new product.

        Raises:
            ResourceNotFoundError: If a referenced category does not exist.
        """
        entity = Product(name=dto.name)
        self._copy_dto_to_entity(dto, entity)
        entity = self._save(entity)
        logger.info("Created product id=%d", entity.id)
        return ProductDTO.from_entity(entity)

    def update(self, product_id: int, dto: ProductDTO) -> ProductDTO:
        """Overwrite the fields and category links of an existing product.

        Raises:
            ResourceNotFoundError: If the product or a referenced category
                does not exist. Nothing is written in that case.
        """
        try:
            entity = self._repository.get_reference(product_id)
        except EntityNotFoundError as exc:
            raise ResourceNotFoundError(RESOURCE, product_id) from exc

        self._copy_dto_to_entity(dto, entity)
        entity = self._save(entity)
        logger.info("Updated product id=%d", product_id)
        return ProductDTO.from_entity(entity)

    def delete(self, product_id: int) -> None:
        """Remove a product and its category links.

        Raises:
            ResourceNotFoundError: If no product has this id.
            DatabaseError: If other rows still reference the product.
        """
        try:
            self._repository.delete_by_id(product_id)
        except EmptyResultError as exc:
            raise ResourceNotFoundError(RESOURCE, product_id) from exc
        except IntegrityViolationError as exc:
            raise DatabaseError("Integrity violation") from exc
        logger.info("Deleted product id=%d", product_id)

    def _save(self, entity: Product) -> Product:
        try:
            return self._repository.save(entity)
        except IntegrityViolationError as exc:
            raise DatabaseError("Integrity violation") from exc

    def _copy_dto_to_entity(self, dto: ProductDTO, entity: Product) -> None:
        entity.name = dto.name
        entity.description = dto.description
        entity.price = dto.price
        entity.img_url = dto.img_url
        entity.date = dto.date

        category_ids = list(dict.fromkeys(c.id for c in dto.categories))
        categories = []
        for category_id in category_ids:
            try:
                categories.append(self._category_repository.get_reference(category_id))
            except EntityNotFoundError as exc:
                raise ResourceNotFoundError("Category", category_id) from exc
        entity.categories = categories
