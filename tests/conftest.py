"""Shared test fixtures for finder-select.

Real finders are interactive, so tests drive tiny shell scripts that read
stdin and print a canned "selection" the way fzf would.
"""

import shutil
import stat

import pytest

from finder_select.command import FinderCommand

SH = shutil.which("sh") or "/bin/sh"


@pytest.fixture
def make_finder(tmp_path):
    """Write an executable fake finder script and return its path."""

    def _make(body: str, name: str = "fake-finder") -> str:
        script = tmp_path / name
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)

    return _make


@pytest.fixture
def finder_command(make_finder):
    """Build a FinderCommand around a fake finder script body."""

    def _build(body: str, *args: str) -> FinderCommand:
        return FinderCommand(name="fake", path=make_finder(body), args=list(args), shell=SH)

    return _build


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the real home and working directory."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in ("SHELL", "FINDER_SELECT_SHELL", "FINDER_SELECT_PREFERRED",
                "FINDER_SELECT_DEFAULT_SHELL", "FINDER_SELECT_ENCODING",
                "FINDER_SELECT_INSTALL_DIR"):
        monkeypatch.delenv(key, raising=False)
    return home, work


@pytest.fixture
def sh():
    """Path of a POSIX shell to launch fake finders through."""
    return SH
