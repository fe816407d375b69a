"""Fake implementation of ProcessRunner for testing.

This fake enables testing the pipeline without starting real processes or
using subprocess mocks.
"""

from collections.abc import Iterator, Sequence
from pathlib import Path

from projrun.core.process import LaunchError, ProcessRunner, format_command


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation of process execution.

    Constructor Injection:
    - All behavior is provided via constructor parameters, keyed by the
      command line as a single space-joined string
    - Calls are tracked in read-only properties

    Examples:
        # Primary command fails, diagnostic command explains why
        >>> runner = FakeProcessRunner(
        ...     exit_codes={"./check.sh": 2},
        ...     outputs={"./diagnose.sh": ["line 3: missing semicolon\\n"]},
        ... )

        # Executable cannot be started
        >>> runner = FakeProcessRunner(missing_executables={"./check.sh"})
    """

    def __init__(
        self,
        *,
        exit_codes: dict[str, int] | None = None,
        outputs: dict[str, list[str]] | None = None,
        missing_executables: set[str] | None = None,
        pid: int = 4242,
    ) -> None:
        """Initialize fake with predetermined process behavior.

        Args:
            exit_codes: Exit status per command line for run() (default: 0)
            outputs: Lines yielded per command line by run_streaming() (default: none)
            missing_executables: Executables (argv[0]) that raise LaunchError
            pid: Process id returned by spawn()
        """
        self._exit_codes = exit_codes or {}
        self._outputs = outputs or {}
        self._missing_executables = missing_executables or set()
        self._pid = pid
        self._run_calls: list[tuple[list[str], Path, bool]] = []
        self._streaming_calls: list[tuple[list[str], Path]] = []
        self._spawn_calls: list[tuple[list[str], Path, Path]] = []

    def _check_launchable(self, command: Sequence[str], cwd: Path) -> None:
        if command[0] in self._missing_executables:
            raise LaunchError(command, cwd, "No such file or directory")

    def run(self, command: Sequence[str], cwd: Path, *, echo_output: bool) -> int:
        self._check_launchable(command, cwd)
        self._run_calls.append((list(command), cwd, echo_output))
        return self._exit_codes.get(format_command(command), 0)

    def run_streaming(self, command: Sequence[str], cwd: Path) -> Iterator[str]:
        self._check_launchable(command, cwd)
        self._streaming_calls.append((list(command), cwd))
        yield from self._outputs.get(format_command(command), [])

    def spawn(self, command: Sequence[str], cwd: Path, log_path: Path) -> int:
        self._check_launchable(command, cwd)
        self._spawn_calls.append((list(command), cwd, log_path))
        return self._pid

    @property
    def run_calls(self) -> list[tuple[list[str], Path, bool]]:
        """List of (command, cwd, echo_output) tuples passed to run()."""
        return self._run_calls.copy()

    @property
    def streaming_calls(self) -> list[tuple[list[str], Path]]:
        """List of (command, cwd) tuples passed to run_streaming()."""
        return self._streaming_calls.copy()

    @property
    def spawn_calls(self) -> list[tuple[list[str], Path, Path]]:
        """List of (command, cwd, log_path) tuples passed to spawn()."""
        return self._spawn_calls.copy()

    @property
    def total_calls(self) -> int:
        return len(self._run_calls) + len(self._streaming_calls) + len(self._spawn_calls)
