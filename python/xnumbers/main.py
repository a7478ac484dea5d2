"""XNumbers — sliding puzzle in the terminal.

Usage::

    xnumbers                              # 4×4, puzzle stays in place
    xnumbers -W 3 -H 3 --depth 40         # 3×3, harder shuffle
    xnumbers --spawn sequential -l 1 -l 1 -l 2 -l 2
    xnumbers --version
"""

import logging
from typing import List, Optional

import typer
from rich.logging import RichHandler

from xnumbers import DESCRIPTION, __version__
from xnumbers.config import SessionConfig
from xnumbers.engine.gamegenerator import DEFAULT_SHUFFLE_DEPTH
from xnumbers.engine.gamespawn import SpawnConfig, SpawnMethod
from xnumbers.errors import ConfigurationError

app = typer.Typer(add_completion=False)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"XNumbers - {DESCRIPTION}, v{__version__}")
        raise typer.Exit()


# -- CLI entry point ----------------------------------------------------------


@app.command()
def main(
    width: int = typer.Option(4, "-W", "--width", help="Board width in tiles."),
    height: int = typer.Option(4, "-H", "--height", help="Board height in tiles."),
    spawn: SpawnMethod = typer.Option(
        SpawnMethod.ORIGIN, "--spawn",
        help="Where the puzzle reappears after a win.",
    ),
    location: Optional[List[float]] = typer.Option(
        None, "-l", "--location",
        help="Spawn scalar; repeat for x,y pairs or xmin,ymin,xmax,ymax.",
    ),
    depth: int = typer.Option(
        DEFAULT_SHUFFLE_DEPTH, "--depth",
        help="Random moves used to shuffle a new game.",
    ),
    help_url: Optional[str] = typer.Option(
        None, "--help-url",
        help="Shown when the help button is pressed.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log engine internals."),
    version: bool = typer.Option(
        False, "--version",
        callback=_version_callback, is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """XNumbers sliding puzzle."""
    _configure_logging(debug)

    try:
        config = SessionConfig(
            width=width,
            height=height,
            spawn=SpawnConfig.parse(spawn.value, location),
            shuffle_depth=depth,
            help_url=help_url,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    from xnumbers.frontend.cli.rich.app import run

    run(config)


if __name__ == "__main__":
    app()
