"""Configuration loading and management for finder-select.

Configuration sources are merged in priority order:
    1. Defaults (defined in FinderConfig)
    2. Global config (~/.finder-select.toml)
    3. Project config (./finder-select.toml)
    4. Explicit config file
    5. Environment variables (FINDER_SELECT_* prefix)
    6. Overrides passed as kwargs (typically CLI flags)

Example:
    >>> config = load_config(preferred=["peco", "fzf"])
    >>> config.preferred
    ['peco', 'fzf']
    >>> config.default_shell
    'sh'
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError

ENV_PREFIX = "FINDER_SELECT_"


@dataclass(frozen=True)
class FinderConfig:
    """Settings shared by the resolver, the finder command and the CLI.

    Attributes:
        shell: Shell used to launch the finder. None defers to $SHELL.
        default_shell: Shell used when neither ``shell`` nor $SHELL is set.
        preferred: Finder names tried before the built-in preset order.
        encoding: Encoding for candidate lines and finder output.
        install_dir: Default destination for ``finder-select install``.
    """

    shell: Optional[str] = None
    default_shell: str = "sh"
    preferred: list[str] = field(default_factory=list)
    encoding: str = "utf-8"
    install_dir: str = "~/.local/bin"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for field_name in ("shell", "default_shell", "encoding", "install_dir"):
            value = getattr(self, field_name)
            if value is None and field_name == "shell":
                continue
            if not isinstance(value, str):
                raise ValueError(f"{field_name} must be a string, got {value!r}")
        if self.shell is not None and not self.shell.strip():
            raise ValueError("shell must not be blank")
        if not self.default_shell.strip():
            raise ValueError("default_shell must not be blank")
        # A lone string would be iterated character by character
        if not isinstance(self.preferred, (list, tuple)):
            raise ValueError(f"preferred must be a list of names, got {self.preferred!r}")
        for name in self.preferred:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"preferred entries must be non-empty strings, got {name!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding}")

    @property
    def resolved_shell(self) -> str:
        """Shell to run the finder through: explicit, then $SHELL, then default."""
        if self.shell:
            return self.shell
        return os.environ.get("SHELL") or self.default_shell

    @property
    def install_path(self) -> Path:
        return Path(self.install_dir).expanduser()


def load_config(config_file: Optional[Path] = None, **overrides) -> FinderConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (None values are ignored)

    Returns:
        Validated FinderConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".finder-select.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "finder-select.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return FinderConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from FINDER_SELECT_* environment variables.

    Supported environment variables:
        FINDER_SELECT_SHELL: str
        FINDER_SELECT_DEFAULT_SHELL: str
        FINDER_SELECT_PREFERRED: comma-separated finder names
        FINDER_SELECT_ENCODING: str
        FINDER_SELECT_INSTALL_DIR: str
    """
    type_hints = get_type_hints(FinderConfig)

    result: dict[str, Any] = {}

    for field_name in FinderConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        parsed = _parse_env_value(env_value, type_hint)
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot come from the environment.
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # Lists (preferred) are comma-separated
    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is str:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[finder-select]`` table is used when present, otherwise the top level.
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Python 3.9-3.10 gets the tomli backport declared in setup.py
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("finder-select")
    if isinstance(section, dict):
        return section
    return data
