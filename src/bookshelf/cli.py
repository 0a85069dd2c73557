#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import Settings, settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to (PORT or BOOKSHELF_API_PORT, else 3003)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    configure_logging(debug=(log_level == "debug"))

    # A --reload worker imports bookshelf afresh and reads these; the
    # in-process app below is built from a Settings read after them
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)

    logger.info(
        "Server running",
        url=f"http://localhost:{port}/graphql",
        host=host,
        port=port,
        reload=reload,
    )

    try:
        if reload:
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
            )
        else:
            from bookshelf.api.app import create_app

            app_settings = Settings()
            # Importing the app module configured logging from the import-time settings
            configure_logging(debug=app_settings.debug)
            uvicorn.run(create_app(app_settings), host=host, port=port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from bookshelf.graphql.schema import print_schema

    sdl = print_schema()
    if output is None:
        click.echo(sdl)
        return

    with open(output, "w", encoding="utf-8") as fh:
        fh.write(sdl + "\n")
    click.echo(f"✓ Schema written to {output}")


def main() -> None:
    """Entry point for the console script."""
    cli()


if __name__ == "__main__":
    main()
