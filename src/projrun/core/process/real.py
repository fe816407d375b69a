"""Real process operations using subprocess."""

import logging
import subprocess
from collections.abc import Iterator, Sequence
from pathlib import Path

from projrun.core.process.abc import LaunchError, ProcessRunner, format_command

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess.

    Commands are executed directly (no shell). A missing executable, a
    non-executable file, or a missing working directory surfaces as
    LaunchError with the OS reason; non-zero exits are returned, never raised.
    """

    def run(self, command: Sequence[str], cwd: Path, *, echo_output: bool) -> int:
        logger.debug("run: %s (cwd=%s, echo=%s)", format_command(command), cwd, echo_output)
        target = None if echo_output else subprocess.DEVNULL
        try:
            result = subprocess.run(
                list(command),
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=target,
                stderr=target,
                check=False,
            )
        except OSError as e:
            raise LaunchError(command, cwd, e.strerror or str(e)) from e

        logger.debug("run finished with exit code %d", result.returncode)
        return result.returncode

    def run_streaming(self, command: Sequence[str], cwd: Path) -> Iterator[str]:
        """Implementation details:
        - Uses subprocess.Popen() with stderr merged into stdout
        - Line buffered text mode, undecodable bytes replaced
        - Waits for the process after stdout closes so no zombie is left
        """
        logger.debug("run_streaming: %s (cwd=%s)", format_command(command), cwd)
        try:
            process = subprocess.Popen(
                list(command),
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,  # Line buffered
            )
        except OSError as e:
            raise LaunchError(command, cwd, e.strerror or str(e)) from e

        try:
            if process.stdout:
                yield from process.stdout
        finally:
            if process.stdout:
                process.stdout.close()
            returncode = process.wait()
            logger.debug("run_streaming finished with exit code %d", returncode)

    def spawn(self, command: Sequence[str], cwd: Path, log_path: Path) -> int:
        """Implementation details:
        - The child gets its own session so it outlives this process
        - stdout and stderr share one append-mode handle on `log_path`
        - Our copy of the handle is closed right after the fork; the child
          keeps writing through its own descriptor
        """
        logger.debug("spawn: %s (cwd=%s, log=%s)", format_command(command), cwd, log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("ab") as log_file:
            try:
                process = subprocess.Popen(
                    list(command),
                    cwd=cwd,
                    stdin=subprocess.DEVNULL,
                    stdout=log_file,
                    stderr=subprocess.STDOUT,
                    start_new_session=True,
                )
            except OSError as e:
                raise LaunchError(command, cwd, e.strerror or str(e)) from e

        logger.debug("spawned pid %d", process.pid)
        return process.pid
