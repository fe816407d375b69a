"""External process execution."""

from projrun.core.process.abc import LaunchError, ProcessRunner, format_command
from projrun.core.process.dry_run import DryRunProcessRunner
from projrun.core.process.real import RealProcessRunner

__all__ = [
    "DryRunProcessRunner",
    "LaunchError",
    "ProcessRunner",
    "RealProcessRunner",
    "format_command",
]
