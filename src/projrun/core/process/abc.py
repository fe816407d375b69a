"""Process invocation abstraction.

This module provides abstraction over external process execution, enabling
dependency injection for testing without mock.patch.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from pathlib import Path


class LaunchError(RuntimeError):
    """Raised when an external command cannot be started at all.

    Distinct from a command that starts and exits non-zero: no exit status
    exists, so the normal success/failure path cannot report it.
    """

    def __init__(self, command: Sequence[str], cwd: Path, reason: str) -> None:
        self.command = list(command)
        self.cwd = cwd
        self.reason = reason
        super().__init__(f"Could not start '{format_command(command)}' in {cwd}: {reason}")


def format_command(command: Sequence[str]) -> str:
    return " ".join(str(arg) for arg in command)


class ProcessRunner(ABC):
    """Abstract interface for running external commands in a working directory."""

    @abstractmethod
    def run(self, command: Sequence[str], cwd: Path, *, echo_output: bool) -> int:
        """Run a command to completion and return its exit status.

        Args:
            command: Command and arguments to execute
            cwd: Working directory for the command
            echo_output: Pass stdout/stderr through to the terminal (True) or
                discard them (False)

        Returns:
            The process exit status

        Raises:
            LaunchError: If the command cannot be started
        """
        ...

    @abstractmethod
    def run_streaming(self, command: Sequence[str], cwd: Path) -> Iterator[str]:
        """Run a command to completion, yielding combined stdout/stderr lines.

        Lines are yielded as they are produced, newline included. The exit
        status is not reported.

        Raises:
            LaunchError: If the command cannot be started (raised on first
                iteration)
        """
        ...

    @abstractmethod
    def spawn(self, command: Sequence[str], cwd: Path, log_path: Path) -> int:
        """Start a command in the background and return immediately.

        Combined stdout/stderr are appended to `log_path`. The process is not
        waited for and its exit status is never collected by the caller.

        Returns:
            The process id

        Raises:
            LaunchError: If the command cannot be started
        """
        ...
