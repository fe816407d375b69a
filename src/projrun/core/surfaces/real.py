"""Terminal-backed output surfaces."""

import logging
import re
import stat
from pathlib import Path

from rich.console import Console

from projrun.core.surfaces.abc import OutputSurface, SurfaceKind, Surfaces, unique_surface_name

logger = logging.getLogger(__name__)

_SUFFIX_RE = re.compile(r"<(\d+)>$")


def log_file_name(surface_name: str) -> str:
    """Map a surface name to a log file name.

    "*projrun-output*" -> "projrun-output.log"
    "*projrun-output*<3>" -> "projrun-output-3.log"
    """
    suffix = ""
    match = _SUFFIX_RE.search(surface_name)
    if match is not None:
        suffix = f"-{match.group(1)}"
        surface_name = surface_name[: match.start()]
    return f"{surface_name.strip('*')}{suffix}.log"


class ConsoleSurfaces(Surfaces):
    """Production surfaces rendered on the terminal.

    - DIAGNOSTIC surfaces are printed to the console below a header rule
      carrying the surface name; nothing is kept after the process exits.
    - STREAM surfaces are log files under `streams_dir`. Names are unique
      against surfaces created by this instance and against log files left by
      earlier invocations.
    """

    def __init__(self, console: Console, streams_dir: Path) -> None:
        self._console = console
        self._streams_dir = streams_dir
        self._names: set[str] = set()

    def create(self, base_name: str, kind: SurfaceKind) -> OutputSurface:
        def is_taken(name: str) -> bool:
            if name in self._names:
                return True
            if kind == SurfaceKind.STREAM:
                return (self._streams_dir / log_file_name(name)).exists()
            return False

        name = unique_surface_name(base_name, is_taken)
        self._names.add(name)

        log_path: Path | None = None
        if kind == SurfaceKind.STREAM:
            self._streams_dir.mkdir(parents=True, exist_ok=True)
            log_path = self._streams_dir / log_file_name(name)
            log_path.touch()

        logger.debug("Created %s surface %s (log=%s)", kind.value, name, log_path)
        return OutputSurface(name=name, kind=kind, log_path=log_path)

    def append(self, surface: OutputSurface, text: str) -> None:
        if surface.log_path is not None:
            with surface.log_path.open("a", encoding="utf-8") as f:
                f.write(text)
            return
        self._console.out(text, end="", highlight=False)

    def focus(self, surface: OutputSurface) -> None:
        self._console.rule(surface.name, style="bold")
        if surface.log_path is not None:
            self._console.print(f"Output is streaming to {surface.log_path}", highlight=False)
            self._console.print(f"Follow it with: tail -f {surface.log_path}", style="dim")

    def seal(self, surface: OutputSurface) -> None:
        if surface.log_path is None:
            return
        surface.log_path.chmod(stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)

    def discard(self, surface: OutputSurface) -> None:
        self._names.discard(surface.name)
        if surface.log_path is not None:
            surface.log_path.unlink(missing_ok=True)
        logger.debug("Discarded surface %s", surface.name)
