"""Command-line interface for Quote Forge.

This module provides the CLI commands for running and managing
the Quote Forge service.
"""

import asyncio

import click

from quoteforge import __version__
from quoteforge.core.config import get_settings
from quoteforge.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="quoteforge")
def cli() -> None:
    """Quote Forge - create and organize original quotes."""


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Quote Forge API server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if bind_workers > 1 and settings.is_sqlite:
        click.echo("ERROR: SQLite does not support multiple worker processes.", err=True)
        raise SystemExit(1)

    configure_logging(settings)
    logger = get_logger(__name__)
    logger.info(
        "Starting Quote Forge server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "quoteforge.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-db")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create the quote tables.

    Use this only in development. In production, run the Alembic migrations.
    """
    from quoteforge.infrastructure.persistence.database import get_db_manager
    from quoteforge.infrastructure.persistence import models  # noqa: F401

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command("issue-token")
@click.option("--user-id", type=str, required=True, help="User ID to put in the token")
@click.option("--email", type=str, default=None, help="Optional email claim")
@click.option(
    "--expires-minutes",
    type=int,
    default=None,
    help="Token lifetime in minutes (defaults to config)",
)
def issue_token(user_id: str, email: str | None, expires_minutes: int | None) -> None:
    """Print an access token for USER_ID, for local development."""
    from datetime import timedelta

    from quoteforge.infrastructure.auth import jwt_service

    settings = get_settings()
    if settings.is_production:
        click.echo("ERROR: Refusing to mint tokens in production mode.", err=True)
        raise SystemExit(1)

    expires_delta = timedelta(minutes=expires_minutes) if expires_minutes else None
    click.echo(jwt_service.create_access_token(user_id, email=email, expires_delta=expires_delta))


@cli.command()
def info() -> None:
    """Display Quote Forge configuration."""
    settings = get_settings()

    click.echo(f"""
Quote Forge v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}

Security:
  Token Expire: {settings.access_token_expire_minutes} minutes

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> None:
    """Main entry point for the ``quoteforge`` command."""
    cli()


if __name__ == "__main__":
    main()
