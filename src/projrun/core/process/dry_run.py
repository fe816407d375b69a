"""No-op wrapper for process operations."""

from collections.abc import Iterator, Sequence
from pathlib import Path

from projrun.cli.output import user_output
from projrun.core.process.abc import ProcessRunner, format_command


class DryRunProcessRunner(ProcessRunner):
    """No-op wrapper that prints commands instead of executing them.

    Every operation reports what would run and behaves as if the command
    succeeded, so the pipeline takes its success path.

    Usage:
        real_runner = RealProcessRunner()
        noop_runner = DryRunProcessRunner(real_runner)

        # Prints "[dry-run] Would run: make lint (in /repo)" and returns 0
        noop_runner.run(["make", "lint"], Path("/repo"), echo_output=False)
    """

    def __init__(self, wrapped: ProcessRunner) -> None:
        """Create a dry-run wrapper around a ProcessRunner implementation.

        Args:
            wrapped: The ProcessRunner implementation to wrap (usually RealProcessRunner)
        """
        self._wrapped = wrapped

    def run(self, command: Sequence[str], cwd: Path, *, echo_output: bool) -> int:
        """Print the command and report success without executing."""
        user_output(f"[dry-run] Would run: {format_command(command)} (in {cwd})")
        return 0

    def run_streaming(self, command: Sequence[str], cwd: Path) -> Iterator[str]:
        """Print the command and yield no output."""
        user_output(f"[dry-run] Would run: {format_command(command)} (in {cwd})")
        yield from ()

    def spawn(self, command: Sequence[str], cwd: Path, log_path: Path) -> int:
        """Print the command and return a placeholder pid."""
        user_output(f"[dry-run] Would start in background: {format_command(command)} (in {cwd})")
        return 0
