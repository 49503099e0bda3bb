"""Install command: fetch or build a finder binary."""

from pathlib import Path
from typing import Optional

import typer

from ..command import FinderCommand
from ..exceptions import FinderSelectError
from ..logging_config import setup_logging
from ..presets import PRESETS_BY_NAME, get_preset
from . import app
from ._common import console, fail, resolve_config


@app.command()
def install(
    name: str = typer.Argument(..., help="Finder to install: " + ", ".join(PRESETS_BY_NAME)),
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Destination directory (default: install_dir from config, ~/.local/bin)",
        file_okay=False,
        dir_okay=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show each install step"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors"),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append debug logs to this file",
        dir_okay=False,
    ),
):
    """
    Install a finder binary.

    [bold cyan]Examples:[/bold cyan]

      finder-select install fzf

      finder-select install peco --path ~/bin
    """
    setup_logging(
        verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None
    )

    preset = get_preset(name)
    if preset is None:
        console.print(f"[red]Error:[/red] unknown finder '{name}'")
        raise typer.Exit(2)

    try:
        dest = path or resolve_config().install_path
        # Not resolved on PATH: the binary may not exist yet.
        command = FinderCommand(name=name, path=name, preset=preset)
        installed = command.install(dest)
    except FinderSelectError as e:
        fail(e)
        return

    if installed is None:
        console.print(f"[yellow]No installer for {name}[/yellow], see {preset.url}")
        return
    console.print(f"[green]Installed {name}[/green] to [blue]{installed}[/blue]")
