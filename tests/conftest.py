"""
Shared fixtures.

Every test gets its own in-memory SQLite database. Environment defaults
are set before the application package is imported so that module-level
settings pick them up.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_ON_STARTUP", "false")

from datetime import datetime, timezone  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from catalog.domain.catalog.entities import Category, Product, Role, User  # noqa: E402
from catalog.infrastructure.catalog.database import build_engine, create_schema  # noqa: E402
from catalog.infrastructure.catalog.seed import seed_catalog  # noqa: E402
from catalog.interfaces.catalog.dependencies import get_engine  # noqa: E402
from catalog.main import app  # noqa: E402

@pytest.fixture
def engine():
    """Empty catalog schema on a private in-memory database."""
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_engine(engine):
    """Catalog schema loaded with the demo data set."""
    seed_catalog(engine)
    return engine


@pytest.fixture
def connection(seeded_engine):
    """Connection inside a transaction on the seeded database."""
    with seeded_engine.begin() as conn:
        yield conn


@pytest.fixture
def client(seeded_engine):
    """TestClient whose requests all hit the seeded database."""
    app.dependency_overrides[get_engine] = lambda: seeded_engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(seeded_engine):
    """Like ``client``, but unhandled server errors come back as 500 responses."""
    app.dependency_overrides[get_engine] = lambda: seeded_engine
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def category() -> Category:
    return Category(id=2, name="Electronics")


@pytest.fixture
def product(category) -> Product:
    return Product(
        id=1,
        name="Phone",
        description="Good phone",
        price=Decimal("800.00"),
        img_url="https://img.com/img.png",
        date=datetime(2020, 10, 20, 3, 0, 0, tzinfo=timezone.utc),
        categories=[category],
    )


@pytest.fixture
def role() -> Role:
    return Role(id=1, authority="ROLE_OPERATOR")


@pytest.fixture
def user(role) -> User:
    return User(
        id=1,
        first_name="Ana",
        last_name="Silva",
        email="ana@gmail.com",
        password="pbkdf2_sha256$1$salt$hash",
        roles=[role],
    )
