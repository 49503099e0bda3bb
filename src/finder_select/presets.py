"""Known finder tools and their default invocation.

The order of DEFAULT_PRESETS is the priority used when the caller does not
name a finder: the first one found on PATH wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .installers import install_fzf, install_fzy, install_peco

Installer = Callable[[Path], Path]


@dataclass(frozen=True)
class Preset:
    """Static defaults for one finder tool."""

    name: str
    args: tuple[str, ...] = ()
    url: str = ""
    installer: Optional[Installer] = None


DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset(
        name="fzf",
        args=("--reverse", "--height=50%", "--ansi", "--multi"),
        url="https://github.com/junegunn/fzf",
        installer=install_fzf,
    ),
    Preset(name="fzy", url="https://github.com/jhawthorn/fzy", installer=install_fzy),
    Preset(name="peco", url="https://github.com/peco/peco", installer=install_peco),
    Preset(name="percol", url="https://github.com/mooz/percol"),
)

PRESETS_BY_NAME: dict[str, Preset] = {preset.name: preset for preset in DEFAULT_PRESETS}


def get_preset(name: str) -> Optional[Preset]:
    """Return the preset for a finder name, or None for unknown tools."""
    return PRESETS_BY_NAME.get(name)
