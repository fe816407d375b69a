"""Named output surfaces for diagnostics and background streams."""

from projrun.core.surfaces.abc import (
    OutputSurface,
    SurfaceKind,
    Surfaces,
    unique_surface_name,
)
from projrun.core.surfaces.dry_run import DryRunSurfaces
from projrun.core.surfaces.real import ConsoleSurfaces

__all__ = [
    "ConsoleSurfaces",
    "DryRunSurfaces",
    "OutputSurface",
    "SurfaceKind",
    "Surfaces",
    "unique_surface_name",
]
