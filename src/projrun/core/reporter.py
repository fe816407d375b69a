"""Reporting of sync run results.

A zero exit status produces the success notice and nothing else. A non-zero
status produces the failure notice and a diagnostic view: a fresh surface
filled with the output of the diagnostic command, re-run in the project root.
"""

import logging

from projrun.core.context import ProjrunContext
from projrun.core.locator import ProjectRoot
from projrun.core.outcome import RunFailed, RunResult, RunSucceeded
from projrun.core.run_config import RunConfiguration
from projrun.core.surfaces import OutputSurface, SurfaceKind

logger = logging.getLogger(__name__)

SUCCESS_NOTICE = "✓ Project is compliant"
FAILURE_NOTICE = "✗ Project is non-compliant"
DIAGNOSTIC_SURFACE_NAME = "projrun-diagnostics"


def format_failure_notice(exit_code: int) -> str:
    return f"{FAILURE_NOTICE} (exit code {exit_code})"


def open_diagnostic_view(
    ctx: ProjrunContext, root: ProjectRoot, config: RunConfiguration
) -> OutputSurface:
    """Create and focus a diagnostic surface, then fill it from the diagnostic command.

    The diagnostic command runs synchronously; its lines are written into the
    surface as they arrive and its exit status is ignored.

    Raises:
        LaunchError: If the diagnostic command cannot be started
    """
    surface = ctx.surfaces.create(DIAGNOSTIC_SURFACE_NAME, SurfaceKind.DIAGNOSTIC)
    ctx.surfaces.focus(surface)

    for line in ctx.runner.run_streaming(config.diagnostic_argv, root.path):
        ctx.surfaces.append(surface, line)

    logger.debug("Diagnostic view %s populated", surface.name)
    return surface


def report(
    ctx: ProjrunContext, root: ProjectRoot, result: RunResult, config: RunConfiguration
) -> RunSucceeded | RunFailed:
    """Surface the outcome of a sync run to the user."""
    if result.succeeded:
        ctx.feedback.success(SUCCESS_NOTICE)
        return RunSucceeded(root=root)

    ctx.feedback.error(format_failure_notice(result.exit_code))
    surface = open_diagnostic_view(ctx, root, config)
    return RunFailed(root=root, exit_code=result.exit_code, diagnostic=surface)
