"""Tagged results of a single pipeline invocation.

The pipeline returns one of these and never prints; the CLI decides what
to display for each variant.
"""

from dataclasses import dataclass

from projrun.core.locator import ProjectRoot, RootNotFound
from projrun.core.run_config import RunMode
from projrun.core.surfaces import OutputSurface


@dataclass(frozen=True)
class RunResult:
    """Exit status of a completed sync run."""

    exit_code: int
    mode: RunMode

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class RunSucceeded:
    root: ProjectRoot


@dataclass(frozen=True)
class RunFailed:
    """The command ran and exited non-zero; `diagnostic` holds the view opened for it."""

    root: ProjectRoot
    exit_code: int
    diagnostic: OutputSurface


@dataclass(frozen=True)
class LaunchFailed:
    """The command could not be started, so no exit status exists."""

    root: ProjectRoot
    command_line: str
    reason: str


@dataclass(frozen=True)
class RunDetached:
    """The command was started in the background; its output goes to `surface`."""

    root: ProjectRoot
    surface: OutputSurface
    pid: int


Outcome = RunSucceeded | RunFailed | RootNotFound | LaunchFailed | RunDetached
