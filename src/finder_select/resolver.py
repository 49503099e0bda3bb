"""Locate a finder executable on the host and bind it to a FinderCommand."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Iterable, Optional

from . import source as sources
from .command import FinderCommand
from .config import FinderConfig
from .exceptions import CommandNotFoundError, NoAvailableCommandError
from .logging_config import get_logger
from .presets import DEFAULT_PRESETS, Preset, get_preset

logger = get_logger(__name__)

Which = Callable[[str], Optional[str]]


def _search_order(
    names: Optional[Iterable[str]], presets: Iterable[Preset]
) -> list[Preset]:
    """Preferred names first, in the given order, then the remaining presets."""
    presets = list(presets)
    by_name = {preset.name: preset for preset in presets}
    order: list[Preset] = []
    seen: set[str] = set()
    for name in names or ():
        if name in seen:
            continue
        seen.add(name)
        order.append(by_name.get(name) or get_preset(name) or Preset(name=name))
    order.extend(preset for preset in presets if preset.name not in seen)
    return order


def lookup(
    names: Optional[Iterable[str]] = None,
    presets: Iterable[Preset] = DEFAULT_PRESETS,
    which: Which = shutil.which,
    shell: Optional[str] = None,
    encoding: str = "utf-8",
) -> FinderCommand:
    """Return a command for the first available finder.

    Args:
        names: Finder names to try before ``presets``
        presets: Known presets in priority order
        which: PATH lookup, ``shutil.which`` by default
        shell: Shell injected into the returned command

    Raises:
        NoAvailableCommandError: nothing in the search order is installed
    """
    tried: list[str] = []
    for preset in _search_order(names, presets):
        tried.append(preset.name)
        path = which(preset.name)
        if path:
            logger.debug("Resolved finder %s at %s", preset.name, path)
            return FinderCommand(
                name=preset.name,
                path=path,
                args=list(preset.args),
                source=sources.stdin(),
                shell=shell,
                preset=preset,
                encoding=encoding,
            )
    raise NoAvailableCommandError(tried)


def new(
    *args: str,
    config: Optional[FinderConfig] = None,
    which: Which = shutil.which,
) -> FinderCommand:
    """Create a finder command.

    With no arguments the first installed preset is used. Otherwise the first
    argument names the finder executable and the rest are its arguments.

    Raises:
        CommandNotFoundError: the named finder is not on PATH
        NoAvailableCommandError: no argument given and no preset installed
    """
    config = config or FinderConfig()

    if not args:
        return lookup(
            config.preferred,
            which=which,
            shell=config.resolved_shell,
            encoding=config.encoding,
        )

    name, extra = args[0], list(args[1:])
    path = which(name)
    if not path:
        raise CommandNotFoundError(name)

    logger.debug("Using requested finder %s at %s", name, path)
    return FinderCommand(
        name=name,
        path=path,
        args=extra,
        source=sources.stdin(),
        shell=config.resolved_shell,
        preset=get_preset(Path(name).name),
        encoding=config.encoding,
    )
