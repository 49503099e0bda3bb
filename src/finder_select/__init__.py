"""
finder-select - pick values with an interactive finder

Hands a list of candidates to an external line filter such as fzf, fzy,
peco or percol, lets the user narrow it down, and returns what was chosen,
mapped back to the original values for key/value candidates.
"""

__version__ = "0.1.0"

from .candidates import BareCandidates, Item, Items, KeyedCandidates
from .command import FinderCommand
from .config import FinderConfig, load_config
from .presets import DEFAULT_PRESETS, Preset
from .resolver import lookup, new

__all__ = [
    "new",  # Main entry point
    "lookup",
    "FinderCommand",
    "Item",
    "Items",
    "KeyedCandidates",
    "BareCandidates",
    "Preset",
    "DEFAULT_PRESETS",
    "FinderConfig",
    "load_config",
]
