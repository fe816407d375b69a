"""No-op wrapper for output surfaces."""

import os
from pathlib import Path

from projrun.cli.output import user_output
from projrun.core.surfaces.abc import OutputSurface, SurfaceKind, Surfaces, unique_surface_name


class DryRunSurfaces(Surfaces):
    """Wrapper that keeps STREAM surfaces off disk.

    STREAM surfaces are only announced: their handle points at the null
    device, and sealing, focusing and discarding them do nothing. DIAGNOSTIC
    surfaces leave no state behind, so they go to the wrapped implementation.
    """

    def __init__(self, wrapped: Surfaces) -> None:
        """Create a dry-run wrapper around a Surfaces implementation.

        Args:
            wrapped: The Surfaces implementation to wrap (usually ConsoleSurfaces)
        """
        self._wrapped = wrapped
        self._stream_names: set[str] = set()

    def create(self, base_name: str, kind: SurfaceKind) -> OutputSurface:
        if kind == SurfaceKind.DIAGNOSTIC:
            return self._wrapped.create(base_name, kind)

        name = unique_surface_name(base_name, self._stream_names.__contains__)
        self._stream_names.add(name)
        user_output(f"[dry-run] Would create output surface {name}")
        return OutputSurface(name=name, kind=kind, log_path=Path(os.devnull))

    def append(self, surface: OutputSurface, text: str) -> None:
        if surface.kind == SurfaceKind.DIAGNOSTIC:
            self._wrapped.append(surface, text)

    def focus(self, surface: OutputSurface) -> None:
        if surface.kind == SurfaceKind.DIAGNOSTIC:
            self._wrapped.focus(surface)

    def seal(self, surface: OutputSurface) -> None:
        if surface.kind == SurfaceKind.DIAGNOSTIC:
            self._wrapped.seal(surface)

    def discard(self, surface: OutputSurface) -> None:
        if surface.kind == SurfaceKind.DIAGNOSTIC:
            self._wrapped.discard(surface)
            return
        self._stream_names.discard(surface.name)
