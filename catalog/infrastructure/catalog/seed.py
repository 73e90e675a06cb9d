"""
Demo data for the catalog.

Loads three categories, 25 products linked to them, two roles and two
users. Seeding is idempotent: nothing is written when categories already
exist.

Usage:
    python -m catalog.cli seed
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy.engine import Engine

from catalog.domain.catalog.entities import Category, Product, Role, User
from catalog.infrastructure.catalog.category_repository import CategoryRepositoryAdapter
from catalog.infrastructure.catalog.product_repository import ProductRepositoryAdapter
from catalog.infrastructure.catalog.role_repository import RoleRepositoryAdapter
from catalog.infrastructure.catalog.user_repository import UserRepositoryAdapter
from catalog.shared.security.passwords import hash_password

logger = logging.getLogger(__name__)

IMG_BASE_URL = "https://raw.githubusercontent.com/devsuperior/dscatalog-resources/master/backend/img"

CATEGORY_NAMES = ["Books", "Electronics", "Computers"]

# (name, price, category indexes into CATEGORY_NAMES)
PRODUCTS = [
    ("The Lord of the Rings", "90.50", [0]),
    ("Smart TV", "2190.00", [1, 2]),
    ("Macbook Pro", "1250.00", [2]),
    ("PC Gamer", "1200.00", [2]),
    ("Rails for Dummies", "100.99", [0]),
    ("PC Gamer Ex", "1350.00", [2]),
    ("PC Gamer X", "1350.00", [2]),
    ("PC Gamer Alfa", "1850.00", [2]),
    ("PC Gamer Tera", "1950.00", [2]),
    ("PC Gamer Y", "1700.00", [2]),
    ("PC Gamer Nitro", "1450.00", [2]),
    ("PC Gamer Card", "1850.00", [2]),
    ("PC Gamer Plus", "1350.00", [2]),
    ("PC Gamer Hera", "2250.00", [2]),
    ("PC Gamer Weed", "2200.00", [2]),
    ("PC Gamer Max", "2340.00", [2]),
    ("PC Gamer Turbo", "1280.00", [2]),
    ("PC Gamer Hot", "1450.00", [2]),
    ("PC Gamer Ez", "1750.00", [2]),
    ("PC Gamer Tr", "1650.00", [2]),
    ("PC Gamer Tx", "1680.00", [2]),
    ("PC Gamer Er", "1850.00", [2]),
    ("PC Gamer Min", "2250.00", [2]),
    ("PC Gamer Boo", "2350.00", [2]),
    ("PC Gamer Foo", "4170.00", [2]),
]

ROLE_AUTHORITIES = ["ROLE_OPERATOR", "ROLE_ADMIN"]

# (first_name, last_name, email, role indexes into ROLE_AUTHORITIES)
USERS = [
    ("Alex", "Brown", "alex@gmail.com", [0]),
    ("Maria", "Green", "maria@gmail.com", [0, 1]),
]

DEMO_PASSWORD = "123456"


def seed_catalog(engine: Engine) -> bool:
    """Insert the demo data set.

    Args:
        engine: Engine pointing at a database whose schema already exists.

    Returns:
        True if data was written, False if the catalog was already seeded.
    """
    with engine.begin() as conn:
        category_repo = CategoryRepositoryAdapter(conn)
        if category_repo.count() > 0:
            logger.info("Catalog already seeded, skipping.")
            return False

        categories = [category_repo.save(Category(name=name)) for name in CATEGORY_NAMES]

        product_repo = ProductRepositoryAdapter(conn)
        first_date = datetime(2020, 7, 13, 20, 50, 7, tzinfo=timezone.utc)
        for index, (name, price, category_indexes) in enumerate(PRODUCTS):
            product_repo.save(
                Product(
                    name=name,
                    description=f"{name}: demo catalog item.",
                    price=Decimal(price),
                    img_url=f"{IMG_BASE_URL}/{index + 1}-big.jpg",
                    date=first_date + timedelta(days=index),
                    categories=[categories[i] for i in category_indexes],
                )
            )

        role_repo = RoleRepositoryAdapter(conn)
        roles = [role_repo.save(Role(authority=authority)) for authority in ROLE_AUTHORITIES]

        user_repo = UserRepositoryAdapter(conn)
        password = hash_password(DEMO_PASSWORD)
        for first_name, last_name, email, role_indexes in USERS:
            user_repo.save(
                User(
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                    password=password,
                    roles=[roles[i] for i in role_indexes],
                )
            )

    logger.info(
        "Seeded %d categories, %d products, %d roles, %d users.",
        len(CATEGORY_NAMES),
        len(PRODUCTS),
        len(ROLE_AUTHORITIES),
        len(USERS),
    )
    return True
