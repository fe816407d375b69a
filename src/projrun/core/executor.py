"""Command execution in a project root."""

import logging

from projrun.core.context import ProjrunContext
from projrun.core.locator import ProjectRoot
from projrun.core.outcome import RunDetached, RunResult
from projrun.core.process import LaunchError
from projrun.core.run_config import RunConfiguration, RunMode
from projrun.core.surfaces import SurfaceKind

logger = logging.getLogger(__name__)

STREAM_SURFACE_NAME = "projrun-output"


def execute_sync(
    ctx: ProjrunContext, root: ProjectRoot, config: RunConfiguration, *, verbose: bool = False
) -> RunResult:
    """Run the configured command in `root`, blocking until it exits.

    Only the exit status is kept. Views under the root are refreshed once the
    process has exited, whatever its status, since the command may have
    rewritten files.

    Raises:
        LaunchError: If the command cannot be started (no refresh is requested)
    """
    exit_code = ctx.runner.run(config.command_argv, root.path, echo_output=verbose)
    logger.debug("Command exited with %d in %s", exit_code, root.path)

    ctx.refresher.refresh(root, config.refresh_command_line)
    return RunResult(exit_code=exit_code, mode=RunMode.SYNC)


def execute_async(ctx: ProjrunContext, root: ProjectRoot, config: RunConfiguration) -> RunDetached:
    """Start the configured command in `root` without waiting for it.

    Combined output streams into a fresh STREAM surface, which is sealed
    against edits and focused. No exit status is ever collected.

    Raises:
        LaunchError: If the command cannot be started (the stream surface is discarded)
    """
    surface = ctx.surfaces.create(STREAM_SURFACE_NAME, SurfaceKind.STREAM)
    if surface.log_path is None:
        raise RuntimeError(f"Stream surface {surface.name} has no log file")

    try:
        pid = ctx.runner.spawn(config.command_argv, root.path, surface.log_path)
    except LaunchError:
        ctx.surfaces.discard(surface)
        raise
    logger.debug("Started pid %d in %s, streaming to %s", pid, root.path, surface.log_path)

    ctx.surfaces.seal(surface)
    ctx.surfaces.focus(surface)
    return RunDetached(root=root, surface=surface, pid=pid)


def execute(
    ctx: ProjrunContext, root: ProjectRoot, config: RunConfiguration, *, verbose: bool = False
) -> RunResult | RunDetached:
    """Run the configured command in `root` in the configured mode.

    Returns:
        RunResult for sync mode. Async mode is fire-and-forget and yields no
        RunResult, only the RunDetached handle to its output surface.
    """
    if config.mode == RunMode.ASYNC:
        return execute_async(ctx, root, config)
    return execute_sync(ctx, root, config, verbose=verbose)
