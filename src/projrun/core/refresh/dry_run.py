"""No-op wrapper for refresh requests."""

from projrun.cli.output import user_output
from projrun.core.locator import ProjectRoot
from projrun.core.refresh.abc import ViewRefresher


class DryRunViewRefresher(ViewRefresher):
    """No-op wrapper that reports refresh requests without running any hook."""

    def __init__(self, wrapped: ViewRefresher) -> None:
        """Create a dry-run wrapper around a ViewRefresher implementation.

        Args:
            wrapped: The ViewRefresher implementation to wrap (usually HookViewRefresher)
        """
        self._wrapped = wrapped

    def refresh(self, root: ProjectRoot, hook_command_line: str | None) -> None:
        """Print the refresh request instead of executing the hook."""
        if hook_command_line is None:
            user_output(f"[dry-run] Would refresh views under {root.path}")
        else:
            user_output(f"[dry-run] Would refresh views under {root.path} via: {hook_command_line}")
