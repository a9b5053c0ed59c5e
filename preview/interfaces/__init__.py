"""
Interfaces Package

Abstract interfaces for preview surfaces.
"""

from preview.interfaces.preview_surface_interface import (
    PreviewError,
    PreviewHandle,
    PreviewSurfaceInterface,
)

__all__ = [
    "PreviewError",
    "PreviewHandle",
    "PreviewSurfaceInterface",
]
