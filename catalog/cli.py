"""
CLI entry point for the catalog service.

Usage:
    # Serve the API with uvicorn
    python -m catalog.cli serve --port 8000

    # Create the schema and load the demo data set
    python -m catalog.cli seed
"""

import argparse
import logging

from catalog.core.config import settings
from catalog.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the catalog API."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("catalog.main:app", host=args.host, port=args.port, reload=args.reload)


def cmd_seed(args: argparse.Namespace) -> None:
    """Create missing tables and load demo data. Safe to run twice."""
    from catalog.infrastructure.catalog.database import build_engine, create_schema
    from catalog.infrastructure.catalog.seed import seed_catalog

    engine = build_engine(args.database_url or settings.get_database_url())
    try:
        create_schema(engine)
        if not seed_catalog(engine):
            logger.info("Nothing to do.")
    finally:
        engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Catalog service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port (default 8000)")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes (development only)"
    )
    serve_parser.set_defaults(func=cmd_serve)

    seed_parser = subparsers.add_parser("seed", help="Create the schema and load demo data")
    seed_parser.add_argument(
        "--database-url", default=None, dest="database_url",
        help="Override the configured database URL",
    )
    seed_parser.set_defaults(func=cmd_seed)

    args = parser.parse_args()
    configure_logging(settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
