"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..command import FinderCommand
from ..config import FinderConfig, load_config
from ..exceptions import ExitError, FinderSelectError
from ..resolver import new

# Selections go to stdout untouched; everything else goes to stderr.
console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    shell: Optional[str] = None,
) -> FinderConfig:
    """Build configuration from CLI options."""
    return load_config(config_file=config, shell=shell)


def resolve_command(
    finder: Optional[str], args: Optional[List[str]], config: FinderConfig
) -> FinderCommand:
    """Resolve the requested finder, or the first installed preset."""
    if finder:
        return new(finder, *(args or []), config=config)
    command = new(config=config)
    if args:
        command.args = list(args)
    return command


def fail(error: FinderSelectError) -> None:
    """Report a finder-select error and exit with a matching status."""
    if isinstance(error, ExitError) and error.aborted:
        raise typer.Exit(error.returncode)
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)
