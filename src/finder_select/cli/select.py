"""Select command: filter stdin (or a file) through a finder."""

import sys
from pathlib import Path
from typing import List, Optional

import typer

from .. import source as sources
from ..candidates import Items
from ..exceptions import FinderSelectError
from ..logging_config import setup_logging
from . import app
from ._common import console, fail, resolve_command, resolve_config


def _parse_keyed(lines: List[str], separator: str) -> Items:
    """Build Items from ``key<sep>value`` lines; lines without sep map to themselves."""
    items = Items()
    for line in lines:
        key, sep, value = line.partition(separator)
        items.add(key, value if sep else key)
    return items


@app.command()
def select(
    finder: Optional[str] = typer.Option(
        None,
        "--finder",
        "-f",
        help="Finder executable to use (default: first installed preset)",
    ),
    args: Optional[List[str]] = typer.Option(
        None,
        "--arg",
        "-a",
        help="Argument passed to the finder (repeatable, replaces preset args)",
    ),
    keyed: Optional[str] = typer.Option(
        None,
        "--keyed",
        "-k",
        help="Treat input as KEY<SEP>VALUE lines, show keys and print values",
    ),
    input_file: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Read candidates from a file instead of stdin",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    shell: Optional[str] = typer.Option(
        None,
        "--shell",
        help="Shell used to launch the finder (default: $SHELL, then sh)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        hidden=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log finder resolution and execution details",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors"),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append debug logs to this file",
        dir_okay=False,
    ),
):
    """
    Choose lines interactively and print them to stdout.

    [bold cyan]Examples:[/bold cyan]

      ls | finder-select select

      git branch --format='%(refname:short)' | finder-select select -f fzy

      printf 'home\\t/home/me\\n' | finder-select select --keyed "$(printf '\\t')"
    """
    logger = setup_logging(
        verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None
    )

    try:
        settings = resolve_config(config=config, shell=shell)
        command = resolve_command(finder, args, settings)
        logger.info(f"Using {command.name} at {command.path}")

        if keyed is not None:
            if input_file is not None:
                text = input_file.read_text(encoding=settings.encoding)
            else:
                text = sys.stdin.read()
            chosen = command.select(_parse_keyed(text.splitlines(), keyed))
        else:
            if input_file is not None:
                command.read(sources.from_file(input_file))
            chosen = command.run()

        for value in chosen:
            typer.echo(value)

    except FinderSelectError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        fail(e)

    except KeyboardInterrupt:
        console.print("\n[yellow]Selection interrupted[/yellow]")
        raise typer.Exit(130)
