"""
Command line entry point: run the server and inspect the catalog.
"""

import os
import sys

import click
import uvicorn

from library_catalog import __version__
from library_catalog.config import settings
from library_catalog.logging import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error"]


@click.group()
@click.version_option(version=__version__, prog_name="library-catalog")
def cli() -> None:
    """Library catalog: a GraphQL API over books, authors and genres."""


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Interface to bind")
@click.option("--port", default=settings.api_port, show_default=True, type=int, help="Port")
@click.option("--reload", is_flag=True, default=settings.api_reload, help="Restart on code changes")
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    show_default=True,
    type=click.Choice(LOG_LEVELS),
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the API server (one worker; the catalog lives in its memory)."""
    configure_logging(debug=(log_level == "debug"), level=log_level)
    logger.info("Starting library catalog API", host=host, port=port, reload=reload)

    # uvicorn imports the app in this process, which configures logging from
    # settings; a --reload worker is a new process and reads the environment
    settings.debug = log_level == "debug"
    settings.log_level = log_level.upper()
    os.environ["CATALOG_LOG_LEVEL"] = log_level
    os.environ["CATALOG_DEBUG"] = "true" if settings.debug else "false"

    try:
        uvicorn.run(
            "library_catalog.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
        )
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from library_catalog.graphql.schema import schema

    sdl = schema.as_str()
    if output is None:
        click.echo(sdl)
        return

    with open(output, "w", encoding="utf-8") as f:
        f.write(sdl + "\n")
    click.echo(f"✓ Schema written to {output}")


@cli.command("seed-summary")
def seed_summary() -> None:
    """Show how many records the startup seed loads."""
    from library_catalog.catalog import Catalog

    for collection, count in Catalog.create(seed=True).counts().items():
        click.echo(f"{collection}: {count}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
