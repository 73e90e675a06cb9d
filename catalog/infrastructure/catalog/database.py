"""
Database schema and engine construction for the catalog context.

Tables are declared with SQLAlchemy Core on a shared ``MetaData`` so that
adapters can build queries without an ORM session. ``build_engine``
returns an engine for any SQLAlchemy URL; SQLite engines get foreign key
enforcement turned on per connection, since SQLite disables it by default.
"""

import logging

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

metadata = MetaData()

category_table = Table(
    "tb_category",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
)

product_table = Table(
    "tb_product",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("description", Text),
    Column("price", Numeric(12, 2)),
    Column("img_url", String(512)),
    Column("date", DateTime(timezone=True)),
)

product_category_table = Table(
    "tb_product_category",
    metadata,
    Column("product_id", ForeignKey("tb_product.id"), primary_key=True),
    Column("category_id", ForeignKey("tb_category.id"), primary_key=True),
)

role_table = Table(
    "tb_role",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("authority", String(64), nullable=False, unique=True),
)

user_table = Table(
    "tb_user",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255)),
)

user_role_table = Table(
    "tb_user_role",
    metadata,
    Column("user_id", ForeignKey("tb_user.id"), primary_key=True),
    Column("role_id", ForeignKey("tb_role.id"), primary_key=True),
)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def build_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    In-memory SQLite URLs share a single connection (``StaticPool``) so
    every request sees the same database.

    Args:
        url: Any SQLAlchemy database URL.

    Returns:
        A configured Engine. No connection is opened yet.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(url, pool_pre_ping=True)


def create_schema(engine: Engine) -> None:
    """Create every catalog table that does not exist yet."""
    metadata.create_all(engine)
    logger.info("Catalog schema ready on %s", engine.url.render_as_string(hide_password=True))
