"""
Tests for the catalog SQLAlchemy adapters.

Runs against an in-memory SQLite database loaded with the demo data set
(3 categories, 25 products, 2 roles, 2 users).
"""

from datetime import datetime
from decimal import Decimal

import pytest

from catalog.domain.catalog.entities import (
    Category,
    PageRequest,
    Product,
    SortDirection,
    User,
)
from catalog.domain.catalog.errors import (
    EmptyResultError,
    EntityNotFoundError,
    IntegrityViolationError,
    InvalidSortPropertyError,
)
from catalog.infrastructure.catalog.category_repository import CategoryRepositoryAdapter
from catalog.infrastructure.catalog.product_repository import ProductRepositoryAdapter
from catalog.infrastructure.catalog.role_repository import RoleRepositoryAdapter
from catalog.infrastructure.catalog.user_repository import UserRepositoryAdapter

SEEDED_PRODUCTS = 25
SEEDED_CATEGORIES = 3

EXISTING_ID = 1
NON_EXISTING_ID = 1000


class TestProductRepository:
    """Tests for ProductRepositoryAdapter."""

    @pytest.fixture
    def repository(self, connection) -> ProductRepositoryAdapter:
        return ProductRepositoryAdapter(connection)

    def test_save_assigns_next_id_when_id_is_none(self, repository, connection) -> None:
        books = CategoryRepositoryAdapter(connection).get_reference(1)
        product = Product(
            name="Phone",
            description="Good phone",
            price=Decimal("800.00"),
            img_url="https://img.com/img.png",
            date=datetime(2020, 10, 20, 3, 0, 0),
            categories=[books],
        )

        saved = repository.save(product)

        assert saved.id == SEEDED_PRODUCTS + 1
        assert repository.count() == SEEDED_PRODUCTS + 1
        reloaded = repository.find_by_id(saved.id)
        assert [c.name for c in reloaded.categories] == ["Books"]

    def test_save_existing_replaces_category_links(self, repository, connection) -> None:
        computers = CategoryRepositoryAdapter(connection).get_reference(3)
        product = repository.get_reference(EXISTING_ID)
        product.name = "The Hobbit"
        product.categories = [computers]

        repository.save(product)

        reloaded = repository.find_by_id(EXISTING_ID)
        assert reloaded.name == "The Hobbit"
        assert [c.id for c in reloaded.categories] == [3]
        assert repository.count() == SEEDED_PRODUCTS

    def test_delete_removes_object_when_id_exists(self, repository) -> None:
        repository.delete_by_id(EXISTING_ID)

        assert repository.find_by_id(EXISTING_ID) is None
        assert repository.count() == SEEDED_PRODUCTS - 1

    def test_delete_raises_empty_result_when_id_does_not_exist(self, repository) -> None:
        with pytest.raises(EmptyResultError):
            repository.delete_by_id(NON_EXISTING_ID)

    def test_find_by_id_returns_product_with_categories(self, repository) -> None:
        product = repository.find_by_id(2)

        assert product is not None
        assert product.name == "Smart TV"
        assert [c.name for c in product.categories] == ["Electronics", "Computers"]

    def test_find_by_id_returns_none_when_id_does_not_exist(self, repository) -> None:
        assert repository.find_by_id(NON_EXISTING_ID) is None

    def test_get_reference_raises_when_id_does_not_exist(self, repository) -> None:
        with pytest.raises(EntityNotFoundError):
            repository.get_reference(NON_EXISTING_ID)

    def test_exists_by_id(self, repository) -> None:
        assert repository.exists_by_id(EXISTING_ID)
        assert not repository.exists_by_id(NON_EXISTING_ID)

    def test_find_all_paged_returns_requested_slice(self, repository) -> None:
        page = repository.find_all_paged(PageRequest(page=2, size=10))

        assert page.total_elements == SEEDED_PRODUCTS
        assert page.total_pages == 3
        assert [p.id for p in page.content] == [21, 22, 23, 24, 25]
        assert page.last

    def test_find_all_paged_sorts_by_name_descending(self, repository) -> None:
        page = repository.find_all_paged(
            PageRequest(page=0, size=3, sort="name", direction=SortDirection.DESC)
        )

        assert [p.name for p in page.content] == [
            "The Lord of the Rings",
            "Smart TV",
            "Rails for Dummies",
        ]

    def test_find_all_paged_rejects_unknown_sort(self, repository) -> None:
        with pytest.raises(InvalidSortPropertyError):
            repository.find_all_paged(PageRequest(sort="color"))


class TestCategoryRepository:
    """Tests for CategoryRepositoryAdapter."""

    @pytest.fixture
    def repository(self, connection) -> CategoryRepositoryAdapter:
        return CategoryRepositoryAdapter(connection)

    def test_find_all_returns_categories_ordered_by_id(self, repository) -> None:
        categories = repository.find_all()

        assert [c.name for c in categories] == ["Books", "Electronics", "Computers"]

    def test_delete_referenced_category_raises_integrity_violation(
        self, repository
    ) -> None:
        with pytest.raises(IntegrityViolationError):
            repository.delete_by_id(EXISTING_ID)

    def test_delete_unreferenced_category(self, repository) -> None:
        category = repository.save(Category(name="Games"))

        repository.delete_by_id(category.id)

        assert repository.count() == SEEDED_CATEGORIES


class TestUserRepository:
    """Tests for UserRepositoryAdapter and RoleRepositoryAdapter."""

    @pytest.fixture
    def repository(self, connection) -> UserRepositoryAdapter:
        return UserRepositoryAdapter(connection)

    def test_find_by_email_loads_roles(self, repository) -> None:
        user = repository.find_by_email("maria@gmail.com")

        assert user is not None
        assert [r.authority for r in user.roles] == ["ROLE_OPERATOR", "ROLE_ADMIN"]

    def test_find_by_email_returns_none_for_unknown_email(self, repository) -> None:
        assert repository.find_by_email("nobody@gmail.com") is None

    def test_duplicate_email_raises_integrity_violation(self, repository) -> None:
        with pytest.raises(IntegrityViolationError):
            repository.save(
                User(first_name="Alex", last_name="Copy", email="alex@gmail.com")
            )

    def test_password_is_not_sortable(self, repository) -> None:
        with pytest.raises(InvalidSortPropertyError):
            repository.find_all_paged(PageRequest(sort="password"))

    def test_roles_are_seeded(self, connection) -> None:
        roles = RoleRepositoryAdapter(connection).find_all()

        assert [r.authority for r in roles] == ["ROLE_OPERATOR", "ROLE_ADMIN"]
