import logging
import os

import click

from projrun.cli.commands.config import config_group
from projrun.cli.commands.root import root_cmd
from projrun.cli.commands.run import run_cmd
from projrun.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if PROJRUN_DEBUG environment variable is set
if os.getenv("PROJRUN_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="projrun")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Run a project's check command from anywhere inside the project."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=False)


cli.add_command(config_group)
cli.add_command(root_cmd)
cli.add_command(run_cmd)


def main() -> None:
    """CLI entry point used by the `projrun` console script."""
    cli()
