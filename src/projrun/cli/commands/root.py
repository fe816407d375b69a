"""Root command - prints the project root enclosing a directory."""

from pathlib import Path

import click

from projrun.cli.core import resolve_marker, resolve_start_dir
from projrun.cli.ensure import fail
from projrun.cli.output import machine_output, user_output
from projrun.core.context import ProjrunContext
from projrun.core.locator import RootNotFound, locate_project_root


@click.command("root")
@click.argument(
    "start_dir",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option("--marker", help="Marker file name identifying the project root.")
@click.pass_obj
def root_cmd(ctx: ProjrunContext, start_dir: Path | None, marker: str | None) -> None:
    """Print the nearest project root above START_DIR (default: current directory).

    Exits 1 when no project root is found, so scripts can test for one.
    """
    marker_file_name = resolve_marker(ctx, marker)
    try:
        located = locate_project_root(resolve_start_dir(ctx, start_dir), marker_file_name)
    except ValueError as e:
        raise fail(str(e)) from e

    if isinstance(located, RootNotFound):
        user_output(located.message)
        raise SystemExit(1)

    machine_output(str(located.path))
