"""Run command - locate the project root, run the configured command, report."""

import dataclasses
import logging
from pathlib import Path

import click

from projrun.cli.core import resolve_run_configuration, resolve_start_dir
from projrun.cli.ensure import fail
from projrun.core.context import ProjrunContext
from projrun.core.locator import RootNotFound
from projrun.core.outcome import LaunchFailed, RunDetached, RunFailed
from projrun.core.pipeline import run_in_project
from projrun.core.process import DryRunProcessRunner, LaunchError
from projrun.core.refresh import DryRunViewRefresher
from projrun.core.run_config import RunMode
from projrun.core.surfaces import DryRunSurfaces
from projrun.core.user_feedback import SuppressedFeedback

logger = logging.getLogger(__name__)


def exit_status_for(exit_code: int) -> int:
    """Map a subprocess return code to a shell exit status.

    Negative codes (killed by signal N) become 128 + N, as a shell reports them.
    """
    if exit_code < 0:
        return 128 - exit_code
    return exit_code


@click.command("run")
@click.argument(
    "start_dir",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option("--marker", help="Marker file name identifying the project root.")
@click.option("--command", "command_line", help="Command line to run in the project root.")
@click.option(
    "--diagnostic",
    "diagnostic_command_line",
    help="Command line producing a readable explanation after a failed run.",
)
@click.option(
    "--refresh",
    "refresh_command_line",
    help="Command asking the host to reload views; '{root}' expands to the project root.",
)
@click.option(
    "--sync/--async",
    "sync_mode",
    default=None,
    help="Block until the command exits (default) or start it in the background.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show the command's own output (sync mode).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only show errors.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print what would be run without running anything.",
)
@click.pass_obj
def run_cmd(
    ctx: ProjrunContext,
    start_dir: Path | None,
    marker: str | None,
    command_line: str | None,
    diagnostic_command_line: str | None,
    refresh_command_line: str | None,
    sync_mode: bool | None,
    verbose: bool,
    quiet: bool,
    dry_run: bool,
) -> None:
    """Run the project command in the nearest project root above START_DIR.

    START_DIR defaults to the current directory. Exits with the command's own
    status when it fails; finding no project root is not an error.
    """
    mode: RunMode | None = None
    if sync_mode is not None:
        mode = RunMode.SYNC if sync_mode else RunMode.ASYNC

    config = resolve_run_configuration(
        ctx,
        marker=marker,
        command_line=command_line,
        diagnostic_command_line=diagnostic_command_line,
        mode=mode,
        refresh_command_line=refresh_command_line,
    )

    if quiet:
        ctx = dataclasses.replace(ctx, feedback=SuppressedFeedback())
    if dry_run and not ctx.dry_run:
        ctx = dataclasses.replace(
            ctx,
            runner=DryRunProcessRunner(ctx.runner),
            refresher=DryRunViewRefresher(ctx.refresher),
            surfaces=DryRunSurfaces(ctx.surfaces),
            dry_run=True,
        )

    start = resolve_start_dir(ctx, start_dir)
    logger.debug("Command invoked: run(start=%s, mode=%s, dry_run=%s)", start, config.mode, dry_run)

    try:
        outcome = run_in_project(ctx, start, config, verbose=verbose)
    except LaunchError as e:
        # Only the diagnostic command can get here; the primary one is folded
        # into LaunchFailed by the pipeline.
        raise fail(str(e)) from e

    if isinstance(outcome, RootNotFound):
        ctx.feedback.info(outcome.message)
        return

    if isinstance(outcome, LaunchFailed):
        raise fail(outcome.reason)

    if isinstance(outcome, RunDetached):
        if ctx.dry_run:
            return
        ctx.feedback.info(
            f"Started '{config.command_line}' in {outcome.root.path} (pid {outcome.pid})"
        )
        return

    if isinstance(outcome, RunFailed):
        raise SystemExit(exit_status_for(outcome.exit_code))
