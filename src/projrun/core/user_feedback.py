"""User-facing notices with mode awareness."""

from abc import ABC, abstractmethod

import click

from projrun.cli.output import user_output


class UserFeedback(ABC):
    """Provides transient user-facing notices that are mode-aware.

    Functions call ctx.feedback methods instead of threading a 'quiet'
    boolean through their signatures.

    Two modes:
    - Interactive: Show all notices (info, success, errors)
    - Quiet: Suppress info and success, only show errors

    Usage:
        ctx.feedback.info("No 'project.marker' found ...")
        ctx.feedback.success("✓ Project is compliant")
        ctx.feedback.error("✗ Project is non-compliant (exit code 2)")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown, even in quiet mode)."""


def _show_error(message: str) -> None:
    user_output(click.style(message, fg="red", bold=True))


class InteractiveFeedback(UserFeedback):
    """Default feedback: every notice goes to stderr."""

    def info(self, message: str) -> None:
        """Print the message unstyled, e.g. the not-found line."""
        user_output(message)

    def success(self, message: str) -> None:
        """Print the message in green."""
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        """Print the message in bold red."""
        _show_error(message)


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet: only failures reach stderr.

    Keeps output clean when projrun is driven from scripts that only look at
    the exit status.
    """

    def info(self, message: str) -> None:
        """Drop the message."""

    def success(self, message: str) -> None:
        """Drop the message; the zero exit status already says it."""

    def error(self, message: str) -> None:
        """Print the message in bold red, as in interactive mode."""
        _show_error(message)
