"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
An entity whose ``id`` is ``None`` has not been persisted yet.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from math import ceil
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class SortDirection(Enum):
    """Sort direction for paged reads."""

    ASC = "asc"
    DESC = "desc"


@dataclass
class Category:
    """A product category."""

    name: str
    id: Optional[int] = None


@dataclass
class Product:
    """A catalog product, tagged with zero or more categories."""

    name: str
    description: Optional[str] = None
    price: Optional[Decimal] = None
    img_url: Optional[str] = None
    date: Optional[datetime] = None
    categories: list[Category] = field(default_factory=list)
    id: Optional[int] = None


@dataclass
class Role:
    """A permission tag granted to users (e.g. ``ROLE_ADMIN``)."""

    authority: str
    id: Optional[int] = None


@dataclass
class User:
    """A catalog user. ``password`` always holds a hash, never plain text."""

    first_name: str
    last_name: str
    email: str
    password: Optional[str] = None
    roles: list[Role] = field(default_factory=list)
    id: Optional[int] = None


@dataclass(frozen=True)
class PageRequest:
    """Which slice of a collection to read, and in what order.

    Attributes:
        page: Zero-based page index.
        size: Maximum number of items per page.
        sort: Entity property to order by.
        direction: Sort direction.
    """

    page: int = 0
    size: int = 12
    sort: str = "id"
    direction: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total size of the collection."""

    content: list[T]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return ceil(self.total_elements / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.page == 0

    @property
    def last(self) -> bool:
        return self.page + 1 >= self.total_pages

    @property
    def empty(self) -> bool:
        return not self.content

    def map(self, converter: Callable[[T], R]) -> "Page[R]":
        """Return a page with the same paging metadata and converted content."""
        return Page(
            content=[converter(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )
