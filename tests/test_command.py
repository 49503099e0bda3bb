"""Tests for FinderCommand: output splitting and subprocess execution."""

import errno
import queue
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from finder_select import source as sources
from finder_select.command import FinderCommand, split_output
from finder_select.exceptions import ExitError, FeedError, LaunchError
from finder_select.presets import Preset


class TestSplitOutput:
    def test_trailing_newline_dropped(self):
        assert split_output("a\nb\nc\n") == ["a", "b", "c"]

    def test_no_trailing_newline(self):
        assert split_output("a\nb\nc") == ["a", "b", "c"]

    def test_empty_output_is_empty_list(self):
        assert split_output("") == []

    def test_only_one_trailing_element_dropped(self):
        assert split_output("a\n\n") == ["a", ""]

    def test_inner_blank_lines_kept(self):
        assert split_output("a\n\nb\n") == ["a", "", "b"]

    def test_whitespace_not_trimmed(self):
        assert split_output("  a \n") == ["  a "]


class TestRun:
    def test_echoes_selection(self, finder_command):
        command = finder_command("cat")
        command.read(sources.from_lines(["a", "b", "c"]))
        assert command.run() == ["a", "b", "c"]

    def test_args_reach_finder(self, finder_command):
        command = finder_command('grep -x -e "$1"', "banana")
        command.read(sources.from_lines(["apple", "banana", "cherry"]))
        assert command.run() == ["banana"]

    def test_no_output_returns_empty(self, finder_command):
        command = finder_command("cat >/dev/null")
        command.read(sources.from_lines(["a"]))
        assert command.run() == []

    def test_output_order_comes_from_finder(self, finder_command):
        command = finder_command("cat >/dev/null\nprintf 'z\\nx\\n'")
        command.read(sources.from_lines(["x", "y", "z"]))
        assert command.run() == ["z", "x"]

    def test_large_input_and_output_do_not_deadlock(self, finder_command):
        # Both directions exceed any pipe buffer; this only completes when
        # feeding and draining happen at the same time.
        lines = [f"candidate-{i:06d}" for i in range(200_000)]
        command = finder_command("cat")
        command.read(sources.from_lines(lines))
        assert command.run() == lines

    def test_finder_exiting_early_is_not_a_feed_error(self, finder_command):
        lines = [f"line-{i}" for i in range(200_000)]
        command = finder_command("head -n 1")
        command.read(sources.from_lines(lines))
        assert command.run() == ["line-0"]

    def test_non_zero_exit_raises(self, finder_command):
        command = finder_command("cat >/dev/null\nexit 130")
        command.read(sources.from_lines(["a"]))
        with pytest.raises(ExitError) as exc_info:
            command.run()
        assert exc_info.value.returncode == 130
        assert exc_info.value.aborted

    def test_other_exit_status_not_aborted(self, finder_command):
        command = finder_command("cat >/dev/null\nexit 2")
        command.read(sources.from_lines(["a"]))
        with pytest.raises(ExitError) as exc_info:
            command.run()
        assert not exc_info.value.aborted

    def test_feed_error_surfaces_and_closes_input(self, finder_command):
        def failing_source(sink):
            sink.write(b"partial\n")
            raise RuntimeError("source exploded")

        # cat only finishes if stdin is closed after the failure
        command = finder_command("cat")
        command.read(failing_source)
        with pytest.raises(FeedError) as exc_info:
            command.run()
        assert "source exploded" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_launch_error_for_missing_shell(self, make_finder):
        command = FinderCommand(
            name="fake", path=make_finder("cat"), shell="/nonexistent/shell"
        )
        command.read(sources.from_lines(["a"]))
        with pytest.raises(LaunchError):
            command.run()

    def test_empty_path_fails_fast(self, sh):
        command = FinderCommand(name="fake", path="", shell=sh)
        with pytest.raises(LaunchError):
            command.run()

    def test_shell_falls_back_to_env(self, make_finder, monkeypatch, sh):
        monkeypatch.setenv("SHELL", sh)
        command = FinderCommand(name="fake", path=make_finder("cat"))
        command.read(sources.from_lines(["only"]))
        assert command.run() == ["only"]

    def test_file_source(self, finder_command, tmp_path):
        data = tmp_path / "input.txt"
        data.write_text("one\ntwo\n")
        command = finder_command("cat")
        command.read(sources.from_file(data))
        assert command.run() == ["one", "two"]

    def test_non_ascii_round_trip(self, finder_command):
        command = finder_command("cat")
        command.read(sources.from_lines(["café", "日本"]))
        assert command.run() == ["café", "日本"]

    def test_interrupt_kills_finder(self, finder_command, monkeypatch):
        started = []
        real_popen = subprocess.Popen

        class InterruptingStdout:
            def __init__(self, stream):
                self.stream = stream

            def read(self):
                raise KeyboardInterrupt

            def close(self):
                self.stream.close()

        def interrupted_popen(*args, **kwargs):
            proc = real_popen(*args, **kwargs)
            proc.stdout = InterruptingStdout(proc.stdout)
            started.append(proc)
            return proc

        monkeypatch.setattr(subprocess, "Popen", interrupted_popen)
        command = finder_command("sleep 5")
        command.read(sources.from_lines(["a"]))
        with pytest.raises(KeyboardInterrupt):
            command.run()
        assert started[0].poll() is not None

    def test_feeder_reports_failed_close(self):
        class BadSink:
            def write(self, data):
                pass

            def close(self):
                raise OSError(errno.EBADF, "Bad file descriptor")

        command = FinderCommand(name="fake", path="fake")
        command.read(sources.from_lines(["a"]))
        done = queue.Queue(maxsize=1)
        command._feed(BadSink(), done)
        error = done.get_nowait()
        assert isinstance(error, OSError)
        assert error.errno == errno.EBADF


class TestCommandLine:
    def test_joined_with_single_spaces(self):
        command = FinderCommand(name="fzf", path="/usr/bin/fzf", args=["--multi", "--ansi"])
        assert command.command_line == "/usr/bin/fzf --multi --ansi"

    def test_without_args(self):
        assert FinderCommand(name="fzy", path="/bin/fzy").command_line == "/bin/fzy"


class TestReadAndInstall:
    def test_read_replaces_source(self):
        command = FinderCommand(name="fzf", path="fzf")
        new_source = sources.from_lines(["x"])
        command.read(new_source)
        assert command.source is new_source

    def test_install_without_preset_is_noop(self, tmp_path):
        command = FinderCommand(name="custom", path="custom")
        assert command.install(tmp_path) is None

    def test_install_without_installer_is_noop(self, tmp_path):
        command = FinderCommand(name="percol", path="percol", preset=Preset(name="percol"))
        assert command.install(tmp_path) is None

    def test_install_delegates_to_preset(self, tmp_path):
        installer = MagicMock(return_value=tmp_path / "fzf")
        command = FinderCommand(
            name="fzf", path="fzf", preset=Preset(name="fzf", installer=installer)
        )
        assert command.install(str(tmp_path)) == tmp_path / "fzf"
        installer.assert_called_once_with(Path(tmp_path))
