"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into services via constructor injection.
These are the composition root for the catalog context.

Each request runs inside one explicit transaction: ``get_connection``
opens it with ``engine.begin()``, commits when the endpoint returns and
rolls back when it raises. It is always injected with
``scope="function"`` so the commit happens before the response is sent;
a failed commit surfaces as an error response, never as a success.
"""

from functools import lru_cache
from typing import Iterator, Literal, Optional

from fastapi import Depends, Query
from sqlalchemy.engine import Connection, Engine

from catalog.application.catalog.category_service import CategoryService
from catalog.application.catalog.product_service import ProductService
from catalog.application.catalog.role_service import RoleService
from catalog.application.catalog.user_service import UserService
from catalog.core.config import settings
from catalog.domain.catalog.entities import PageRequest, SortDirection
from catalog.infrastructure.catalog.category_repository import CategoryRepositoryAdapter
from catalog.infrastructure.catalog.database import build_engine
from catalog.infrastructure.catalog.product_repository import ProductRepositoryAdapter
from catalog.infrastructure.catalog.role_repository import RoleRepositoryAdapter
from catalog.infrastructure.catalog.user_repository import UserRepositoryAdapter

# Largest row offset a BIGINT OFFSET clause accepts.
MAX_OFFSET = 2**63 - 1


@lru_cache
def get_engine() -> Engine:
    """Build the SQLAlchemy engine once, from application settings."""
    return build_engine(settings.get_database_url())


def get_connection(engine: Engine = Depends(get_engine)) -> Iterator[Connection]:
    """Yield a connection wrapped in a transaction scoped to the request."""
    with engine.begin() as conn:
        yield conn


def get_page_request(
    page: int = Query(
        default=0,
        ge=0,
        le=MAX_OFFSET // settings.max_page_size,
        description="Zero-based page index",
    ),
    size: Optional[int] = Query(
        default=None, ge=1, le=settings.max_page_size, description="Items per page"
    ),
    sort: str = Query(default="id", description="Property to sort by"),
    direction: Literal["asc", "desc"] = Query(default="asc"),
) -> PageRequest:
    """Build a PageRequest from the standard paging query parameters."""
    return PageRequest(
        page=page,
        size=size or settings.default_page_size,
        sort=sort,
        direction=SortDirection(direction),
    )


def get_category_service(
    conn: Connection = Depends(get_connection, scope="function"),
) -> CategoryService:
    """Build CategoryService with its infrastructure dependencies."""
    return CategoryService(repository=CategoryRepositoryAdapter(conn))


def get_product_service(
    conn: Connection = Depends(get_connection, scope="function"),
) -> ProductService:
    """Build ProductService with its infrastructure dependencies."""
    return ProductService(
        repository=ProductRepositoryAdapter(conn),
        category_repository=CategoryRepositoryAdapter(conn),
    )


def get_user_service(
    conn: Connection = Depends(get_connection, scope="function"),
) -> UserService:
    """Build UserService with its infrastructure dependencies."""
    return UserService(
        repository=UserRepositoryAdapter(conn),
        role_repository=RoleRepositoryAdapter(conn),
    )


def get_role_service(
    conn: Connection = Depends(get_connection, scope="function"),
) -> RoleService:
    """Build RoleService with its infrastructure dependencies."""
    return RoleService(repository=RoleRepositoryAdapter(conn))
