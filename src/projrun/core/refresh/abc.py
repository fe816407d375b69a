"""View refresh abstraction.

After a sync run the external command may have rewritten files on disk, so
any open view of files under the project root must be reloaded.
"""

from abc import ABC, abstractmethod

from projrun.core.locator import ProjectRoot


class ViewRefresher(ABC):
    """Abstract interface for requesting a refresh of views under a project root."""

    @abstractmethod
    def refresh(self, root: ProjectRoot, hook_command_line: str | None) -> None:
        """Request a refresh of every view backed by files under `root`.

        Args:
            root: Project root whose files may have changed
            hook_command_line: Optional command that performs the refresh in the
                host environment. "{root}" in any argument is replaced by the
                project root path.
        """
        ...
