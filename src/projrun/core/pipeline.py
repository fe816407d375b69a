"""Locate → execute → report, for one invocation.

Per-invocation states:

    Idle → Locating → NotFound                          (terminal)
                    → Located → Executing → Detached     (terminal, async)
                                          → LaunchFailed (terminal)
                                          → Succeeded    (terminal)
                                          → Failed → Diagnosing (terminal)

There is no retry; a failed run is re-triggered by the user from Idle.
"""

import logging
from pathlib import Path

from projrun.core.context import ProjrunContext
from projrun.core.executor import execute
from projrun.core.locator import RootNotFound, locate_project_root
from projrun.core.outcome import LaunchFailed, Outcome, RunDetached
from projrun.core.process import LaunchError
from projrun.core.reporter import report
from projrun.core.run_config import RunConfiguration

logger = logging.getLogger(__name__)


def run_in_project(
    ctx: ProjrunContext, start_dir: Path, config: RunConfiguration, *, verbose: bool = False
) -> Outcome:
    """Run the configured command in the project containing `start_dir`.

    Args:
        ctx: Context providing the process runner, surfaces, refresher and feedback
        start_dir: Directory the search for the project root starts from
        config: What to run and how
        verbose: Pass the primary command's output through to the terminal

    Returns:
        RootNotFound if no project encloses `start_dir` (no process is started),
        LaunchFailed if the command could not be started, RunDetached for async
        runs, otherwise the reported RunSucceeded or RunFailed
    """
    logger.debug("Locating %s from %s", config.marker_file_name, start_dir)
    located = locate_project_root(start_dir, config.marker_file_name)
    if isinstance(located, RootNotFound):
        logger.debug("NotFound: %s", located.message)
        return located

    logger.debug("Located %s; executing %r (%s)", located.path, config.command_line, config.mode)
    try:
        result = execute(ctx, located, config, verbose=verbose)
    except LaunchError as e:
        logger.debug("LaunchFailed: %s", e)
        return LaunchFailed(root=located, command_line=config.command_line, reason=str(e))

    if isinstance(result, RunDetached):
        logger.debug("Detached: pid %d streaming to %s", result.pid, result.surface.name)
        return result

    outcome = report(ctx, located, result, config)
    logger.debug("Reported %s", type(outcome).__name__)
    return outcome
