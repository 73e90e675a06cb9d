"""
Check that the configured catalog database is reachable.

Usage:
    DATABASE_URL=postgresql+psycopg2://... python scripts/check_db_connect.py
"""

import logging
import sys

import sqlalchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.core.config import settings
from catalog.infrastructure.catalog.database import build_engine
from catalog.shared.logging import configure_logging

logger = logging.getLogger("check_db_connect")


def main() -> int:
    configure_logging(settings.log_level)
    logger.info("SQLAlchemy version: %s", sqlalchemy.__version__)

    engine = build_engine(settings.get_database_url())
    logger.info("Engine URL: %s", engine.url.render_as_string(hide_password=True))
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Could not connect to the catalog database")
        return 1
    finally:
        engine.dispose()

    logger.info("Database connection OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
