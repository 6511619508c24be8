"""Command-line interface for Linkshelf."""

import asyncio

import click

from linkshelf.core.config import get_settings
from linkshelf.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="Linkshelf")
def cli() -> None:
    """Linkshelf - collection management API for bookmarks."""


@cli.command()
@click.option("--host", type=str, default="0.0.0.0", help="Host to bind to")
@click.option("--port", type=int, default=8000, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str, port: int, reload: bool) -> None:
    """Start the Linkshelf API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Linkshelf server",
        host=host,
        port=port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "linkshelf.infrastructure.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command("init-db")
def init_db() -> None:
    """Create the database tables (development databases only)."""
    from linkshelf.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    async def _create() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
        finally:
            await db.disconnect()

    asyncio.run(_create())
    click.echo("Database tables created")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
