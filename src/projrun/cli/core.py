"""Shared helpers for CLI commands: configuration resolution and start paths."""

from pathlib import Path

from projrun.cli.ensure import Ensure, fail
from projrun.core.context import ProjrunContext
from projrun.core.run_config import RunConfiguration, RunMode


def resolve_start_dir(ctx: ProjrunContext, start_dir: Path | None) -> Path:
    """Interpret START_DIR relative to the invocation directory (default: cwd)."""
    if start_dir is None:
        return ctx.cwd
    if start_dir.is_absolute():
        return start_dir
    return ctx.cwd / start_dir


def load_stored_config(ctx: ProjrunContext) -> RunConfiguration | None:
    """Load the config file if present; malformed files are fatal."""
    if not ctx.config_store.exists():
        return None
    try:
        return ctx.config_store.load()
    except ValueError as e:
        raise fail(str(e)) from e


def resolve_run_configuration(
    ctx: ProjrunContext,
    *,
    marker: str | None,
    command_line: str | None,
    diagnostic_command_line: str | None,
    mode: RunMode | None,
    refresh_command_line: str | None,
) -> RunConfiguration:
    """Combine the stored configuration with command-line overrides.

    Options win over file values. Without a config file every required value
    must come from the options.
    """
    stored = load_stored_config(ctx)

    if stored is None:
        hint = f"no config file at {ctx.config_store.path()} (run 'projrun config init')"
        config = RunConfiguration(
            marker_file_name=Ensure.not_none(marker, f"--marker is required: {hint}"),
            command_line=Ensure.not_none(command_line, f"--command is required: {hint}"),
            diagnostic_command_line=Ensure.not_none(
                diagnostic_command_line, f"--diagnostic is required: {hint}"
            ),
            mode=mode or RunMode.SYNC,
            refresh_command_line=refresh_command_line or None,
        )
    else:
        config = stored.with_overrides(
            marker_file_name=marker,
            command_line=command_line,
            diagnostic_command_line=diagnostic_command_line,
            mode=mode,
            refresh_command_line=refresh_command_line,
        )

    try:
        config.validate()
    except ValueError as e:
        raise fail(str(e)) from e
    return config


def resolve_marker(ctx: ProjrunContext, marker: str | None) -> str:
    """Marker from the option, falling back to the config file."""
    if marker is not None:
        return marker
    stored = Ensure.not_none(
        load_stored_config(ctx),
        f"--marker is required: no config file at {ctx.config_store.path()}",
    )
    return stored.marker_file_name
