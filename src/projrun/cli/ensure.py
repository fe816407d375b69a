"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TypeVar

import click

from projrun.cli.output import user_output

T = TypeVar("T")


def fail(error_message: str, exit_code: int = 1) -> SystemExit:
    """Output a styled error and build the SystemExit to raise.

    Usage:
        raise fail("Config not found")
    """
    user_output(click.style("Error: ", fg="red") + error_message)
    return SystemExit(exit_code)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            raise fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | None` and returns `T`,
        allowing the type checker to understand the value cannot be None after
        this call.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            raise fail(error_message)
        return value
