"""Refresh requests delivered through an optional hook command."""

import logging

from projrun.core.locator import ProjectRoot
from projrun.core.process.abc import LaunchError, ProcessRunner
from projrun.core.refresh.abc import ViewRefresher
from projrun.core.run_config import split_command_line

logger = logging.getLogger(__name__)


def expand_hook_command(hook_command_line: str, root: ProjectRoot) -> list[str]:
    """Split the hook command and substitute {root} in each argument."""
    return [arg.replace("{root}", str(root.path)) for arg in split_command_line(hook_command_line)]


class HookViewRefresher(ViewRefresher):
    """Production refresher.

    Runs the hook command (e.g. an editor client asking open buffers to
    revert) in the project root. Without a hook the request is only logged.
    A hook that cannot start or exits non-zero is logged as a warning: the
    refresh is a side effect and never changes the run's outcome.
    """

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner = runner

    def refresh(self, root: ProjectRoot, hook_command_line: str | None) -> None:
        if hook_command_line is None:
            logger.debug("Refresh requested for %s (no refresh hook configured)", root.path)
            return

        command = expand_hook_command(hook_command_line, root)
        try:
            exit_code = self._runner.run(command, root.path, echo_output=False)
        except LaunchError as e:
            logger.warning("Refresh hook could not start: %s", e)
            return

        if exit_code != 0:
            logger.warning("Refresh hook exited with code %d", exit_code)
