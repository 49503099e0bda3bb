"""Candidate model: what the caller offers to the finder.

``Items`` is the key/value candidate set. Callers may also pass a plain
sequence of strings. Both are normalized into one of exactly two variants,
``KeyedCandidates`` or ``BareCandidates``, before anything is run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple, Union

from .exceptions import InvalidCandidatesError


@dataclass(frozen=True)
class Item:
    """A single candidate: the displayed key and the value it stands for."""

    key: str
    value: Any


class Items(list):
    """Ordered collection of Item. Insertion order is display order."""

    def add(self, key: str, value: Any) -> None:
        self.append(Item(key=key, value=value))

    def keys(self) -> list[str]:
        return [item.key for item in self]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Items:
        items = cls()
        for key, value in mapping.items():
            items.add(key, value)
        return items

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Any]]) -> Items:
        items = cls()
        for key, value in pairs:
            items.add(key, value)
        return items


@dataclass(frozen=True)
class KeyedCandidates:
    """Key/value candidates; selection maps keys back to values."""

    items: Tuple[Item, ...]

    def lines(self) -> list[str]:
        return [item.key for item in self.items]

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class BareCandidates:
    """Plain string candidates; selection returns the lines themselves."""

    strings: Tuple[str, ...]

    def lines(self) -> list[str]:
        return list(self.strings)

    def __len__(self) -> int:
        return len(self.strings)


Candidates = Union[KeyedCandidates, BareCandidates]


def as_candidates(obj: object) -> Candidates:
    """Normalize caller input into one of the two candidate variants.

    Raises:
        InvalidCandidatesError: for anything but Items, the two variants,
            or a list/tuple made only of strings.
    """
    if isinstance(obj, (KeyedCandidates, BareCandidates)):
        return obj
    if isinstance(obj, Items):
        return KeyedCandidates(tuple(obj))
    if isinstance(obj, (list, tuple)):
        if all(isinstance(line, str) for line in obj):
            return BareCandidates(tuple(obj))
        if all(isinstance(item, Item) for item in obj):
            return KeyedCandidates(tuple(obj))
    raise InvalidCandidatesError(obj)
