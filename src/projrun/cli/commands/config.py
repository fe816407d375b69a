"""Config commands - inspect and edit ~/.projrun/config.toml."""

import dataclasses

import click

from projrun.cli.core import load_stored_config
from projrun.cli.ensure import Ensure, fail
from projrun.cli.output import machine_output, user_output
from projrun.core.context import ProjrunContext
from projrun.core.run_config import RunConfiguration, RunMode

CONFIG_KEYS = ("marker", "command", "diagnostic_command", "mode", "refresh_command")


def _get_config_value(config: RunConfiguration, key: str) -> str | None:
    """Return the stored value for a config key, None when unset."""
    match key:
        case "marker":
            return config.marker_file_name
        case "command":
            return config.command_line
        case "diagnostic_command":
            return config.diagnostic_command_line
        case "mode":
            return config.mode.value
        case "refresh_command":
            return config.refresh_command_line
        case _:
            raise fail(f"Invalid config key: {key} (expected one of: {', '.join(CONFIG_KEYS)})")


def _update_config_field(config: RunConfiguration, key: str, value: str) -> RunConfiguration:
    """Return a new RunConfiguration with one field replaced.

    An empty value for refresh_command removes the hook.
    """
    match key:
        case "marker":
            return dataclasses.replace(config, marker_file_name=value)
        case "command":
            return dataclasses.replace(config, command_line=value)
        case "diagnostic_command":
            return dataclasses.replace(config, diagnostic_command_line=value)
        case "mode":
            try:
                return dataclasses.replace(config, mode=RunMode.parse(value))
            except ValueError as e:
                raise fail(str(e)) from e
        case "refresh_command":
            return dataclasses.replace(config, refresh_command_line=value or None)
        case _:
            raise fail(f"Invalid config key: {key} (expected one of: {', '.join(CONFIG_KEYS)})")


def _require_config(ctx: ProjrunContext) -> RunConfiguration:
    return Ensure.not_none(
        load_stored_config(ctx),
        f"Config not found at {ctx.config_store.path()} (run 'projrun config init')",
    )


@click.group("config")
def config_group() -> None:
    """Manage projrun configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: ProjrunContext) -> None:
    """Print a list of configuration keys and values."""
    config = load_stored_config(ctx)
    machine_output(click.style(f"Configuration ({ctx.config_store.path()}):", bold=True))
    if config is None:
        machine_output("  (not configured - run 'projrun config init' to create)")
        return

    for key in CONFIG_KEYS:
        value = _get_config_value(config, key)
        if value is not None:
            machine_output(f"  {key}={value}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: ProjrunContext, key: str) -> None:
    """Print the value of a given configuration key."""
    value = _get_config_value(_require_config(ctx), key)
    if value is None:
        user_output(f"Key not set: {key}")
        raise SystemExit(1)
    machine_output(value)


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: ProjrunContext, key: str, value: str) -> None:
    """Set the value of a configuration key."""
    updated = _update_config_field(_require_config(ctx), key, value)
    try:
        updated.validate()
    except ValueError as e:
        raise fail(str(e)) from e

    try:
        ctx.config_store.save(updated)
    except PermissionError as e:
        raise fail(str(e)) from e
    user_output(f"Set {key}={value}")


@config_group.command("path")
@click.pass_obj
def config_path(ctx: ProjrunContext) -> None:
    """Print the location of the configuration file."""
    machine_output(str(ctx.config_store.path()))


@config_group.command("init")
@click.option("--marker", required=True, help="Marker file name identifying a project root.")
@click.option("--command", "command_line", required=True, help="Command line to run.")
@click.option(
    "--diagnostic",
    "diagnostic_command_line",
    required=True,
    help="Command line run after a failure to explain it.",
)
@click.option(
    "--mode",
    type=click.Choice([mode.value for mode in RunMode]),
    default=RunMode.SYNC.value,
    show_default=True,
    help="Default run mode.",
)
@click.option("--refresh", "refresh_command_line", help="Optional view refresh hook command.")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing configuration file.")
@click.pass_obj
def config_init(
    ctx: ProjrunContext,
    marker: str,
    command_line: str,
    diagnostic_command_line: str,
    mode: str,
    refresh_command_line: str | None,
    force: bool,
) -> None:
    """Write a new configuration file."""
    Ensure.invariant(
        force or not ctx.config_store.exists(),
        f"Config already exists at {ctx.config_store.path()} (use --force to overwrite)",
    )

    config = RunConfiguration(
        marker_file_name=marker,
        command_line=command_line,
        diagnostic_command_line=diagnostic_command_line,
        mode=RunMode.parse(mode),
        refresh_command_line=refresh_command_line,
    )
    try:
        config.validate()
    except ValueError as e:
        raise fail(str(e)) from e

    try:
        ctx.config_store.save(config)
    except PermissionError as e:
        raise fail(str(e)) from e
    user_output(click.style("✓", fg="green") + f" Wrote {ctx.config_store.path()}")
