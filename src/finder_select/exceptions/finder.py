"""Finder exceptions: resolving, feeding and running the external filter."""

from typing import Optional, Sequence

from .base import FinderSelectError


class ResolutionError(FinderSelectError):
    """Base class for errors locating a finder executable."""

    pass


class CommandNotFoundError(ResolutionError):
    """Raised when an explicitly requested finder is not on PATH."""

    def __init__(self, name: str):
        super().__init__(f"{name}: not found", details={"command": name})
        self.name = name


class NoAvailableCommandError(ResolutionError):
    """Raised when none of the known finders is installed."""

    def __init__(self, tried: Sequence[str]):
        super().__init__(
            "no available finder command",
            details={"tried": ", ".join(tried)} if tried else None,
        )
        self.tried = list(tried)


class SelectionError(FinderSelectError):
    """Base class for caller mistakes detected before a finder is started."""

    pass


class NoItemsError(SelectionError):
    """Raised when there is nothing to filter."""

    def __init__(self) -> None:
        super().__init__("no items")


class InvalidCandidatesError(SelectionError):
    """Raised when select() receives neither Items nor a list of strings."""

    def __init__(self, received: object):
        type_name = type(received).__name__
        super().__init__(
            f"unsupported candidates type: {type_name}",
            details={"expected": "Items or a sequence of str"},
        )
        self.received_type = type_name


class ExecutionError(FinderSelectError):
    """Base class for failures while the finder process runs."""

    pass


class LaunchError(ExecutionError):
    """Raised when the finder subprocess cannot be started."""

    def __init__(self, command_line: str, reason: str):
        super().__init__(
            f"failed to start finder: {reason}",
            details={"command": command_line},
        )
        self.command_line = command_line
        self.reason = reason


class FeedError(ExecutionError):
    """Raised when the line source fails while writing to the finder."""

    def __init__(self, reason: str):
        super().__init__(f"failed to feed finder input: {reason}")
        self.reason = reason


class ExitError(ExecutionError):
    """Raised when the finder exits with a non-zero status.

    fzf-style tools exit 1 when nothing matched and 130 when the user
    pressed ESC or Ctrl-C; both are reported through ``aborted``.
    """

    ABORT_CODES = frozenset({1, 130})

    def __init__(self, returncode: int, command_line: Optional[str] = None):
        details = {"returncode": str(returncode)}
        if command_line:
            details["command"] = command_line
        super().__init__(f"finder exited with status {returncode}", details=details)
        self.returncode = returncode
        self.command_line = command_line

    @property
    def aborted(self) -> bool:
        return self.returncode in self.ABORT_CODES


class InstallError(FinderSelectError):
    """Raised when a finder binary cannot be installed."""

    def __init__(self, tool: str, reason: str):
        super().__init__(
            f"Failed to install {tool}",
            details={"tool": tool, "reason": reason},
        )
        self.tool = tool
        self.reason = reason
