"""Output surface abstraction.

A surface is a named destination for process output that the host renders:
diagnostic views after a failed run and live streams for background runs.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SurfaceKind(Enum):
    DIAGNOSTIC = "diagnostic"
    STREAM = "stream"


@dataclass(frozen=True)
class OutputSurface:
    """Handle to a surface created by a Surfaces implementation.

    Attributes:
        name: Unique display name, e.g. "*projrun-diagnostics*<2>"
        kind: What the surface is used for
        log_path: Backing file for STREAM surfaces, None otherwise
    """

    name: str
    kind: SurfaceKind
    log_path: Path | None = None


def unique_surface_name(base_name: str, is_taken: Callable[[str], bool]) -> str:
    """Generate a surface name not yet in use.

    The first candidate is "*base*"; later ones get a "<n>" suffix starting at 2.
    """
    candidate = f"*{base_name}*"
    if not is_taken(candidate):
        return candidate

    n = 2
    while is_taken(f"{candidate}<{n}>"):
        n += 1
    return f"{candidate}<{n}>"


class Surfaces(ABC):
    """Abstract interface for creating and displaying output surfaces."""

    @abstractmethod
    def create(self, base_name: str, kind: SurfaceKind) -> OutputSurface:
        """Create a fresh, uniquely named surface.

        STREAM surfaces come with a `log_path` that background processes write to.
        """
        ...

    @abstractmethod
    def append(self, surface: OutputSurface, text: str) -> None:
        """Append text to the surface. Surfaces are append-only."""
        ...

    @abstractmethod
    def focus(self, surface: OutputSurface) -> None:
        """Bring the surface to the user's attention."""
        ...

    @abstractmethod
    def seal(self, surface: OutputSurface) -> None:
        """Make the surface non-editable for the user.

        Writers that already hold the surface open keep appending.
        """
        ...

    @abstractmethod
    def discard(self, surface: OutputSurface) -> None:
        """Remove a surface that never received a writer, freeing its name."""
        ...
