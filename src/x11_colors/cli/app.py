"""Typer CLI application."""

import logging
import sys
from typing import Annotated

import typer
from rich.console import Console

from x11_colors.config import Settings
from x11_colors.core.catalog import CatalogError
from x11_colors.log import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="list-colors",
        help="List all the named RGB colors.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def list_colors(
        plain: Annotated[bool, typer.Option(
            "--plain",
            help="Disable formatting for friendlier output with Unix tooling. "
                 "Default when not printing to a terminal.",
        )] = False,
    ) -> None:
        """List all the named RGB colors.

        Colors are shown as a grid of swatches sized to the terminal, or one
        [bold]name = #rrggbb[/] line per color with [bold]--plain[/].
        """
        from x11_colors.cli.list_colors import list_colors as run
        from x11_colors.io.reader import load_catalog

        settings = Settings.from_env()
        configure_logging(settings.log_level)

        try:
            catalog = load_catalog(settings.rgb_txt)
            code = run(catalog, plain, sys.stdout)
        except CatalogError as e:
            logger.debug("Catalog load failed", exc_info=True)
            console.print(f"[red]Invalid color table: {e}[/]")
            raise typer.Exit(1)
        except (OSError, MemoryError) as e:
            logger.debug("list-colors failed", exc_info=True)
            console.print(f"[red]list-colors failed: {e}[/]")
            raise typer.Exit(1)

        raise typer.Exit(code)

    return app
