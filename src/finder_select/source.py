"""Line sources that feed candidate text into a finder's standard input.

A source is any callable taking a writable binary sink. It writes zero or
more newline-terminated lines and raises to report failure; returning
normally means the input is complete. The caller owns closing the sink.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import BinaryIO, Callable, Iterable

Source = Callable[[BinaryIO], None]

_CHUNK_SIZE = 64 * 1024


def stdin() -> Source:
    """Pass this process's own standard input through to the finder."""

    def _source(sink: BinaryIO) -> None:
        shutil.copyfileobj(sys.stdin.buffer, sink, _CHUNK_SIZE)

    return _source


def from_lines(lines: Iterable[str], encoding: str = "utf-8") -> Source:
    """Serialize an ordered collection of strings, one per line."""

    def _source(sink: BinaryIO) -> None:
        for line in lines:
            sink.write(line.encode(encoding) + b"\n")

    return _source


def from_file(path: str | Path) -> Source:
    """Stream a file's contents as finder input."""

    def _source(sink: BinaryIO) -> None:
        with open(path, "rb") as f:
            shutil.copyfileobj(f, sink, _CHUNK_SIZE)

    return _source
