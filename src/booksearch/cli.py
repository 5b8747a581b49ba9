#!/usr/bin/env python3
"""
Main CLI entry point for the Booksearch backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from booksearch import __version__
from booksearch.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="booksearch")
def cli() -> None:
    """Booksearch CLI - run the API server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=3001, type=int, help="Port to bind to (default: 3001)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Booksearch API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Booksearch API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Settings are re-read by each worker process on import
    if log_level == "debug":
        os.environ["BOOKSEARCH_DEBUG"] = "true"
        os.environ["BOOKSEARCH_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSEARCH_DEBUG", "false")
        os.environ.setdefault("BOOKSEARCH_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "booksearch.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from booksearch.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--database-url", default=None, help="Override BOOKSEARCH_DATABASE_URL")
def init_db(database_url: str | None) -> None:
    """Create the database tables if they do not exist."""
    from booksearch.database.connection import close_database, create_tables, init_database

    configure_logging()

    async def do_init():
        init_database(database_url, force_reinit=True)
        try:
            await create_tables()
        finally:
            await close_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database tables created")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
