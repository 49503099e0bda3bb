"""Installers that fetch or build finder binaries into a directory.

Each installer takes the destination directory, creates it if needed and
returns the path of the installed executable. They shell out to git, make
or go, so those tools must be on PATH.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

from .exceptions import InstallError
from .logging_config import get_logger

logger = get_logger(__name__)

FZF_REPO = "https://github.com/junegunn/fzf.git"
FZY_REPO = "https://github.com/jhawthorn/fzy.git"
PECO_MODULE = "github.com/peco/peco/cmd/peco@latest"

# Network clones and builds; generous but bounded
_STEP_TIMEOUT = 600


def _require(tool: str, program: str) -> str:
    path = shutil.which(program)
    if path is None:
        raise InstallError(tool, f"{program} is required but was not found on PATH")
    return path


def _run_step(
    tool: str, cmd: list[str], cwd: Optional[Path] = None, env: Optional[dict] = None
) -> None:
    logger.debug("Installing %s: %s", tool, " ".join(cmd))
    try:
        subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            env=env,
            check=True,
            capture_output=True,
            text=True,
            timeout=_STEP_TIMEOUT,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise InstallError(tool, stderr or f"{cmd[0]} exited with status {e.returncode}") from e
    except subprocess.TimeoutExpired as e:
        raise InstallError(tool, f"{cmd[0]} timed out after {_STEP_TIMEOUT}s") from e
    except OSError as e:
        raise InstallError(tool, str(e)) from e


def _copy_binary(tool: str, built: Path, dest: Path) -> Path:
    if not built.exists():
        raise InstallError(tool, f"build did not produce {built.name}")
    dest.mkdir(parents=True, exist_ok=True)
    target = dest / built.name
    shutil.copy2(built, target)
    target.chmod(0o755)
    logger.info("Installed %s to %s", tool, target)
    return target


def _clone(tool: str, repo: str, workdir: Path) -> Path:
    git = _require(tool, "git")
    checkout = workdir / tool
    _run_step(tool, [git, "clone", "--depth", "1", repo, str(checkout)])
    return checkout


def install_fzf(dest: Path) -> Path:
    """Clone fzf and use its own install script to fetch the prebuilt binary."""
    with tempfile.TemporaryDirectory(prefix="finder-select-") as tmp:
        checkout = _clone("fzf", FZF_REPO, Path(tmp))
        _run_step("fzf", ["./install", "--bin"], cwd=checkout)
        return _copy_binary("fzf", checkout / "bin" / "fzf", dest)


def install_fzy(dest: Path) -> Path:
    """Clone fzy and build it from source with make."""
    make = _require("fzy", "make")
    with tempfile.TemporaryDirectory(prefix="finder-select-") as tmp:
        checkout = _clone("fzy", FZY_REPO, Path(tmp))
        _run_step("fzy", [make], cwd=checkout)
        return _copy_binary("fzy", checkout / "fzy", dest)


def install_peco(dest: Path) -> Path:
    """Build peco with ``go install`` straight into ``dest``."""
    go = _require("peco", "go")
    dest.mkdir(parents=True, exist_ok=True)
    env = dict(os.environ, GOBIN=str(dest.resolve()))
    _run_step("peco", [go, "install", PECO_MODULE], env=env)
    target = dest / "peco"
    if not target.exists():
        raise InstallError("peco", f"go install did not produce {target}")
    logger.info("Installed peco to %s", target)
    return target
