"""Preset listing and finder resolution commands."""

import shutil
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import FinderSelectError
from ..presets import DEFAULT_PRESETS
from . import app
from ._common import console, fail, resolve_command, resolve_config


@app.command()
def presets():
    """List known finders in priority order and whether they are installed."""
    table = Table(title="Finder presets", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Default args")
    table.add_column("Installer")
    table.add_column("Path")

    for index, preset in enumerate(DEFAULT_PRESETS, start=1):
        path = shutil.which(preset.name)
        table.add_row(
            str(index),
            preset.name,
            " ".join(preset.args) or "-",
            "yes" if preset.installer else "-",
            f"[green]{path}[/green]" if path else "[dim]not found[/dim]",
        )

    console.print(table)


@app.command()
def which(
    name: Optional[str] = typer.Argument(
        None, help="Finder to resolve (default: first installed preset)"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        dir_okay=False,
        hidden=True,
    ),
):
    """Print the finder command line that select would run."""
    try:
        command = resolve_command(name, None, resolve_config(config=config))
    except FinderSelectError as e:
        fail(e)
        return

    typer.echo(command.command_line)
