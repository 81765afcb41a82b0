"""
CLI entry point for the accounts backend.

Usage:
    # Create the users, organizations and schools tables
    python -m app.cli init-db

    # Run the HTTP API
    python -m app.cli serve --port 8080
"""

import argparse
import logging

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Apply the accounts schema to the configured database."""
    from app.infrastructure.accounts.schema import create_schema
    from app.infrastructure.database import build_engine

    engine = build_engine(settings.get_database_dsn(), echo=args.echo)
    try:
        create_schema(engine)
    finally:
        engine.dispose()


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI application under uvicorn."""
    import uvicorn

    logger.info("Starting accounts API at http://%s:%d", args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


def main() -> None:
    configure_logging(level=settings.log_level)

    parser = argparse.ArgumentParser(description="Campus Accounts CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.add_argument(
        "--echo", action="store_true",
        help="Log every SQL statement",
    )
    init_parser.set_defaults(func=cmd_init_db)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8080)
    serve_parser.add_argument(
        "--reload", action="store_true",
        help="Restart on code changes (development only)",
    )
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
