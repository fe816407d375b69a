"""Run configuration data structures and loading.

Provides the immutable RunConfiguration threaded into every pipeline call and
the ConfigStore that reads it from ~/.projrun/config.toml.
"""

import os
import shlex
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

import tomlkit

from projrun.core.locator import validate_marker_file_name

CONFIG_ENV_VAR = "PROJRUN_CONFIG"


class RunMode(Enum):
    """Whether the runner blocks until the command exits."""

    SYNC = "sync"
    ASYNC = "async"

    @classmethod
    def parse(cls, value: str) -> "RunMode":
        """Parse a mode name ("sync" or "async", case-insensitive).

        Raises:
            ValueError: If value names no known mode
        """
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        valid = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Invalid run mode {value!r} (expected one of: {valid})")


def split_command_line(command_line: str) -> list[str]:
    """Split a command line into argv using POSIX shell word rules.

    No shell is involved when the command runs, so pipes and redirections are
    passed through as literal arguments.

    Raises:
        ValueError: If the command line is empty or has unbalanced quotes
    """
    argv = shlex.split(command_line)
    if not argv:
        raise ValueError("Command line is empty")
    return argv


@dataclass(frozen=True)
class RunConfiguration:
    """Immutable description of what to run and how.

    All fields are read-only after construction. Build variants with
    `with_overrides()`.
    """

    marker_file_name: str
    command_line: str
    diagnostic_command_line: str
    mode: RunMode = RunMode.SYNC
    refresh_command_line: str | None = None

    @property
    def command_argv(self) -> list[str]:
        return split_command_line(self.command_line)

    @property
    def diagnostic_argv(self) -> list[str]:
        return split_command_line(self.diagnostic_command_line)

    def validate(self) -> None:
        """Check every field, raising ValueError on the first problem."""
        validate_marker_file_name(self.marker_file_name)
        split_command_line(self.command_line)
        split_command_line(self.diagnostic_command_line)
        if self.refresh_command_line is not None:
            split_command_line(self.refresh_command_line)

    def with_overrides(
        self,
        *,
        marker_file_name: str | None = None,
        command_line: str | None = None,
        diagnostic_command_line: str | None = None,
        mode: RunMode | None = None,
        refresh_command_line: str | None = None,
    ) -> "RunConfiguration":
        """Return a copy with every non-None argument replacing the stored value.

        An empty refresh_command_line removes the refresh hook.
        """
        changes: dict[str, object] = {}
        if marker_file_name is not None:
            changes["marker_file_name"] = marker_file_name
        if command_line is not None:
            changes["command_line"] = command_line
        if diagnostic_command_line is not None:
            changes["diagnostic_command_line"] = diagnostic_command_line
        if mode is not None:
            changes["mode"] = mode
        if refresh_command_line is not None:
            changes["refresh_command_line"] = refresh_command_line or None
        return replace(self, **changes)  # type: ignore[arg-type]


def parse_run_table(data: dict, source: Path) -> RunConfiguration:
    """Build a RunConfiguration from the `[run]` table of a parsed config file.

    Raises:
        ValueError: If required keys are missing or values are malformed
    """
    run = data.get("run")
    if not isinstance(run, dict):
        raise ValueError(f"Missing [run] table in {source}")

    missing = [key for key in ("marker", "command", "diagnostic_command") if not run.get(key)]
    if missing:
        raise ValueError(f"Missing {', '.join(repr(k) for k in missing)} in [run] of {source}")

    refresh = run.get("refresh_command")
    config = RunConfiguration(
        marker_file_name=str(run["marker"]),
        command_line=str(run["command"]),
        diagnostic_command_line=str(run["diagnostic_command"]),
        mode=RunMode.parse(str(run.get("mode", RunMode.SYNC.value))),
        refresh_command_line=str(refresh) if refresh else None,
    )
    config.validate()
    return config


def render_config(config: RunConfiguration) -> str:
    """Render a RunConfiguration as TOML text."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("projrun configuration"))

    run = tomlkit.table()
    run["marker"] = config.marker_file_name
    run["command"] = config.command_line
    run["diagnostic_command"] = config.diagnostic_command_line
    run["mode"] = config.mode.value
    if config.refresh_command_line is not None:
        run["refresh_command"] = config.refresh_command_line
    doc["run"] = run

    return tomlkit.dumps(doc)


class ConfigStore(ABC):
    """Abstract interface for run configuration access.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config file exists."""
        ...

    @abstractmethod
    def load(self) -> RunConfiguration:
        """Load run configuration.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is missing required fields or malformed
        """
        ...

    @abstractmethod
    def save(self, config: RunConfiguration) -> None:
        """Save run configuration."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for messages and the state directory)."""
        ...

    def state_dir(self) -> Path:
        """Directory holding projrun state such as stream logs."""
        return self.path().parent


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.projrun/config.toml.

    The location can be overridden with the PROJRUN_CONFIG environment variable.
    """

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> RunConfiguration:
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed TOML in {config_path}: {e}") from e
        return parse_run_table(data, config_path)

    def save(self, config: RunConfiguration) -> None:
        """Save run configuration, creating the parent directory if needed.

        Raises:
            PermissionError: If the directory exists but is not writable
        """
        config_path = self.path()
        parent = config_path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(
                f"Cannot write to directory: {parent}\n"
                f"The directory exists but is not writable."
            )

        parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(render_config(config), encoding="utf-8")

    def path(self) -> Path:
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".projrun" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: RunConfiguration | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> RunConfiguration:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def save(self, config: RunConfiguration) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/projrun/config.toml")
