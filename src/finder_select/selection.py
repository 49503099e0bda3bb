"""Selection: feed candidates to a finder and map the chosen lines back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Sequence

from . import source as sources
from .candidates import BareCandidates, Item, KeyedCandidates, as_candidates
from .exceptions import NoItemsError
from .logging_config import get_logger

if TYPE_CHECKING:
    from .command import FinderCommand

logger = get_logger(__name__)


def reconcile(items: Sequence[Item], selected: Iterable[str]) -> list[Any]:
    """Map selected keys back to item values.

    Results follow the finder's order. A key shared by several items yields
    every matching value, in candidate order.
    """
    values: list[Any] = []
    for key in selected:
        for item in items:
            if item.key == key:
                values.append(item.value)
    return values


def select(command: FinderCommand, candidates: Any) -> list[Any]:
    """Run ``command`` over ``candidates`` and return what the user chose.

    ``candidates`` may be Items, a list or tuple of str, or one of the two
    candidate variants. Shape and emptiness are checked before anything is
    launched.

    Raises:
        InvalidCandidatesError: unsupported candidate type
        NoItemsError: nothing to choose from
        ExecutionError: propagated unchanged from ``command.run``
    """
    normalized = as_candidates(candidates)
    if len(normalized) == 0:
        raise NoItemsError()

    command.read(sources.from_lines(normalized.lines(), encoding=command.encoding))
    selected = command.run()
    logger.debug("%s returned %d line(s)", command.name, len(selected))

    if isinstance(normalized, KeyedCandidates):
        return reconcile(normalized.items, selected)
    if isinstance(normalized, BareCandidates):
        return list(selected)
    raise AssertionError(f"unhandled candidates variant: {type(normalized).__name__}")
