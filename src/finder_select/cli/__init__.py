"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="finder-select",
    help="finder-select - choose lines with fzf, fzy, peco or percol",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """Pick values through an interactive finder."""
    if version:
        console.print(f"[bold cyan]finder-select[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


# Import subcommands to register them
from .select import select as _select  # noqa: F401, E402
from .presets import presets as _presets, which as _which  # noqa: F401, E402
from .install import install as _install  # noqa: F401, E402
