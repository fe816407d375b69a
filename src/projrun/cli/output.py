"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for a human (stderr).
machine_output() is for results other programs consume (stdout).
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write a machine-readable result to stdout."""
    click.echo(message, nl=nl)
