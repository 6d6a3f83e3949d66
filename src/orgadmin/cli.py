"""Command-line interface for OrgAdmin.

This module provides the CLI commands for running and managing
the OrgAdmin application.
"""

import asyncio

import click

from orgadmin.core.config import get_settings
from orgadmin.core.logging import LoggingContext, configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="OrgAdmin")
def cli() -> None:
    """OrgAdmin - Department and role administration API.

    Settings are read from ORGADMIN_* environment variables and .env.
    """


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
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
    """Start the OrgAdmin server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if bind_workers > 1 and settings.is_sqlite:
        raise click.BadParameter(
            "SQLite does not support multiple worker processes.",
            param_hint="--workers",
        )

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting OrgAdmin server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "orgadmin.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def init_db(force: bool) -> None:
    """Initialize the database.

    Creates the department and role tables. Use this only in development.
    In production, use migrations instead.
    """
    from orgadmin.infrastructure.persistence import models  # noqa: F401
    from orgadmin.infrastructure.persistence.database import (
        ensure_sqlite_directory,
        get_db_manager,
    )

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

    ensure_sqlite_directory(settings)

    async def initialize() -> None:
        db = get_db_manager()
        try:
            if not await db.check_connection():
                raise click.ClickException("Failed to connect to database")
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    with LoggingContext(command="init-db"):
        asyncio.run(initialize())


@cli.command()
def info() -> None:
    """Display OrgAdmin configuration."""
    settings = get_settings()

    click.echo(f"""
OrgAdmin v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}
  Legacy Codes: {settings.legacy_error_codes}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Pool Size:    {settings.db_pool_size}
  Echo:         {settings.db_echo}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
