"""A resolved finder executable and the subprocess plumbing to run it."""

from __future__ import annotations

import queue
import subprocess
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from . import source as sources
from .config import FinderConfig
from .exceptions import ExitError, FeedError, LaunchError
from .logging_config import get_logger
from .presets import Preset

logger = get_logger(__name__)


def split_output(output: str) -> list[str]:
    """Split finder output into lines.

    Only the single empty element produced by a final newline is dropped;
    other blank lines are real selections.
    """
    lines = output.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class FinderCommand:
    """One launchable finder: executable path, arguments and input source.

    Attributes:
        name: Logical tool name, e.g. ``fzf``
        args: Arguments appended to the executable on the command line
        path: Resolved executable path
        source: Line source fed to the finder's stdin on ``run``
        shell: Shell to launch through; None resolves from configuration
        preset: Matching preset, which supplies the install hook
        encoding: Encoding of candidate lines and finder output
    """

    name: str
    path: str
    args: list[str] = field(default_factory=list)
    source: sources.Source = field(default_factory=sources.stdin)
    shell: Optional[str] = None
    preset: Optional[Preset] = None
    encoding: str = "utf-8"

    @property
    def command_line(self) -> str:
        return " ".join([self.path, *self.args])

    def read(self, source: sources.Source) -> None:
        """Attach the line source used by the next ``run``."""
        self.source = source

    def install(self, path: str | Path) -> Optional[Path]:
        """Install the finder binary into ``path``.

        Tools without an installer treat this as a no-op and return None.
        """
        if self.preset is None or self.preset.installer is None:
            logger.debug("No installer for %s, nothing to do", self.name)
            return None
        return self.preset.installer(Path(path).expanduser())

    def select(self, candidates: Any) -> list[Any]:
        """Let the user pick from ``candidates``; see selection.select."""
        from .selection import select

        return select(self, candidates)

    def run(self) -> list[str]:
        """Run the finder over the attached source and return the chosen lines.

        Raises:
            LaunchError: the shell could not be started
            FeedError: the source failed while writing
            ExitError: the finder exited non-zero (usually an abort)
        """
        if not self.path:
            raise LaunchError(self.command_line, f"no executable path for {self.name}")

        shell = self.shell or FinderConfig().resolved_shell
        command_line = self.command_line
        logger.debug("Running %s -c %r", shell, command_line)

        try:
            proc = subprocess.Popen(
                [shell, "-c", command_line],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                # stderr stays attached to the terminal so the finder UI is visible
                stderr=None,
            )
        except OSError as e:
            raise LaunchError(command_line, str(e)) from e

        # Feeding must run alongside the finder. Writing all input before
        # reading its output can block on a full pipe while the finder blocks
        # on its own full stdout, and neither side ever proceeds.
        done: queue.Queue = queue.Queue(maxsize=1)
        feeder = threading.Thread(
            target=self._feed,
            args=(proc.stdin, done),
            name="finder-feeder",
            daemon=True,
        )
        feeder.start()

        try:
            try:
                stdout = proc.stdout.read() if proc.stdout else b""
            finally:
                if proc.stdout:
                    proc.stdout.close()

            feed_error = done.get()
            returncode = proc.wait()
        except BaseException:
            # Interrupted (usually Ctrl-C): never leave the finder running.
            # Killing it also breaks the feeder's pipe so the thread ends.
            proc.kill()
            proc.wait()
            raise

        if feed_error is not None:
            raise FeedError(str(feed_error)) from feed_error
        if returncode != 0:
            logger.debug("%s exited with status %d", self.name, returncode)
            raise ExitError(returncode, command_line)

        return split_output(stdout.decode(self.encoding, errors="replace"))

    def _feed(self, sink, done: queue.Queue) -> None:
        """Write the source into the finder's stdin and report completion."""
        error: Optional[BaseException] = None
        try:
            try:
                self.source(sink)
            except BrokenPipeError:
                # The finder exited before consuming all input; that is a
                # normal way for a selection to finish.
                logger.debug("%s closed its input early", self.name)
            except Exception as e:
                error = e
            finally:
                try:
                    sink.close()
                except BrokenPipeError:
                    pass
                except OSError as e:
                    error = error or e
        finally:
            # run() blocks on this; it must be posted on every path
            done.put(error)
