"""Project root discovery.

Walks up from a starting directory to the nearest ancestor holding the
configured marker file. Pure filesystem query, no context required.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectRoot:
    """A directory identified as a project root by its marker file."""

    path: Path
    marker_file_name: str

    @property
    def marker_path(self) -> Path:
        return self.path / self.marker_file_name


@dataclass(frozen=True)
class RootNotFound:
    """Sentinel value indicating no ancestor contains the marker file.

    Not an error: callers should do nothing and show `message` so the user
    knows why no command ran.
    """

    start_dir: Path
    marker_file_name: str
    reason: str | None = None

    @property
    def message(self) -> str:
        if self.reason is not None:
            return self.reason
        return f"No '{self.marker_file_name}' found in {self.start_dir} or any parent directory"


def validate_marker_file_name(marker_file_name: str) -> None:
    """Reject marker names that cannot name a single directory entry.

    Raises:
        ValueError: If the name is empty, '.', '..', or contains a path separator
    """
    if not marker_file_name or marker_file_name in (".", ".."):
        raise ValueError(f"Invalid marker file name: {marker_file_name!r}")
    if "/" in marker_file_name or "\\" in marker_file_name:
        raise ValueError(
            f"Marker file name must not contain a path separator: {marker_file_name!r}"
        )


def locate_project_root(start_dir: Path, marker_file_name: str) -> ProjectRoot | RootNotFound:
    """Walk up from `start_dir` to find the nearest directory containing the marker.

    The start directory itself is checked first. The walk stops at the
    filesystem root, detected as the directory whose parent is itself.
    Symlinks are not resolved, so the returned root is expressed in the same
    terms as `start_dir`. A directory that cannot be searched is treated as
    not holding the marker.

    Args:
        start_dir: Directory (or file, whose parent is used) to start from
        marker_file_name: Name of the entry identifying a project root

    Returns:
        ProjectRoot for the nearest match, RootNotFound otherwise

    Raises:
        ValueError: If marker_file_name is not a plain entry name
    """
    validate_marker_file_name(marker_file_name)

    start = start_dir.absolute()
    try:
        start_exists = start.exists()
        start_is_file = start_exists and start.is_file()
    except PermissionError as e:
        return RootNotFound(
            start_dir=start,
            marker_file_name=marker_file_name,
            reason=f"Cannot access start path '{start}': {e.strerror}",
        )
    if not start_exists:
        return RootNotFound(
            start_dir=start,
            marker_file_name=marker_file_name,
            reason=f"Start path '{start}' does not exist",
        )
    if start_is_file:
        start = start.parent

    current = start
    while True:
        logger.debug("Checking %s for %s", current, marker_file_name)
        try:
            if (current / marker_file_name).exists():
                return ProjectRoot(path=current, marker_file_name=marker_file_name)
        except PermissionError:
            logger.debug("Cannot search %s, moving up", current)

        parent = current.parent
        if parent == current:
            return RootNotFound(start_dir=start, marker_file_name=marker_file_name)
        current = parent
