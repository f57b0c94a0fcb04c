"""CLI main module for tash."""

from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from tash import __version__
from tash.config import get_settings
from tash.errors import AllocationError
from tash.shell import build_shell

app = typer.Typer(
    name="tash",
    help="The Amazing SHell.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tash {__version__}")
        raise typer.Exit()


@app.command()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (default: WARNING)"),
    interactive: Optional[bool] = typer.Option(
        None, "--interactive/--no-interactive", help="Use the terminal prompt (default: detect a tty)"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Read commands and run them until `exit` or end of input."""
    settings = get_settings(log_level=log_level, interactive=interactive)
    loop = build_shell(settings)
    try:
        loop.run()
    except AllocationError as e:
        logger.opt(exception=e).debug("fatal allocation failure")
        Console(stderr=True).print("tash: allocation error", markup=False)
        raise typer.Exit(1) from e
    # External command statuses are never propagated.
    raise typer.Exit(0)


if __name__ == "__main__":
    app()
