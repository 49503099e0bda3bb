"""Exception hierarchy for finder-select."""

from .base import FinderSelectError
from .config import ConfigurationError
from .finder import (
    CommandNotFoundError,
    ExecutionError,
    ExitError,
    FeedError,
    InstallError,
    InvalidCandidatesError,
    LaunchError,
    NoAvailableCommandError,
    NoItemsError,
    ResolutionError,
    SelectionError,
)

__all__ = [
    "FinderSelectError",
    "ConfigurationError",
    "ResolutionError",
    "CommandNotFoundError",
    "NoAvailableCommandError",
    "SelectionError",
    "NoItemsError",
    "InvalidCandidatesError",
    "ExecutionError",
    "LaunchError",
    "FeedError",
    "ExitError",
    "InstallError",
]
