"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses; the only behavior is building a DTO from
its entity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from catalog.domain.catalog.entities import Category, Product, Role, User


@dataclass(frozen=True)
class CategoryDTO:
    """Category projection.

    Attributes:
        id: Category id, None when the DTO describes a new category.
        name: Display name.
    """

    name: str
    id: Optional[int] = None

    @classmethod
    def from_entity(cls, entity: Category) -> "CategoryDTO":
        return cls(id=entity.id, name=entity.name)


@dataclass(frozen=True)
class ProductDTO:
    """Product projection including its categories.

    Attributes:
        id: Product id, None for a new product.
        name: Product name.
        description: Long description.
        price: Unit price.
        img_url: URL of the product picture.
        date: Publication timestamp.
        categories: Categories the product belongs to. Only ``id`` is read
            when the DTO is used as input.
    """

    name: str
    description: Optional[str] = None
    price: Optional[Decimal] = None
    img_url: Optional[str] = None
    date: Optional[datetime] = None
    categories: list[CategoryDTO] = field(default_factory=list)
    id: Optional[int] = None

    @classmethod
    def from_entity(cls, entity: Product) -> "ProductDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            price=entity.price,
            img_url=entity.img_url,
            date=entity.date,
            categories=[CategoryDTO.from_entity(c) for c in entity.categories],
        )


@dataclass(frozen=True)
class RoleDTO:
    """Role projection."""

    authority: str
    id: Optional[int] = None

    @classmethod
    def from_entity(cls, entity: Role) -> "RoleDTO":
        return cls(id=entity.id, authority=entity.authority)


@dataclass(frozen=True)
class UserDTO:
    """User projection. Never carries the password."""

    first_name: str
    last_name: str
    email: str
    roles: list[RoleDTO] = field(default_factory=list)
    id: Optional[int] = None

    @classmethod
    def from_entity(cls, entity: User) -> "UserDTO":
        return cls(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            roles=[RoleDTO.from_entity(r) for r in entity.roles],
        )


@dataclass(frozen=True)
class UserInsertDTO:
    """Input DTO for creating a user.

    Attributes:
        password: Plain-text password, hashed before it is stored.
    """

    first_name: str
    last_name: str
    email: str
    password: str
    roles: list[RoleDTO] = field(default_factory=list)
