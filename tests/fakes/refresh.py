"""Fake implementation of ViewRefresher for testing."""

from projrun.core.locator import ProjectRoot
from projrun.core.refresh import ViewRefresher


class FakeViewRefresher(ViewRefresher):
    """Records refresh requests without running any hook."""

    def __init__(self) -> None:
        self._refresh_calls: list[tuple[ProjectRoot, str | None]] = []

    def refresh(self, root: ProjectRoot, hook_command_line: str | None) -> None:
        self._refresh_calls.append((root, hook_command_line))

    @property
    def refresh_calls(self) -> list[tuple[ProjectRoot, str | None]]:
        """List of (root, hook_command_line) tuples, one per refresh request."""
        return self._refresh_calls.copy()
