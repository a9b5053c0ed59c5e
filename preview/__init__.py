"""
Preview Module

Local, revocable previews of selected video files.

Public API:
    - PreviewBinder: Binds a selected file to a surface
    - PreviewHandle: Active preview reference
    - PreviewError: Binding failure
    - HtmlPreviewSurface / MockPreviewSurface: Surfaces

Usage:
    from preview import HtmlPreviewSurface, PreviewBinder

    binder = PreviewBinder(HtmlPreviewSurface())
    handle = binder.bind(selected_file)
"""

from preview.controllers.preview_binder import PreviewBinder
from preview.implementations.html_surface import HtmlPreviewSurface
from preview.implementations.mock_surface import MockPreviewSurface
from preview.interfaces.preview_surface_interface import (
    PreviewError,
    PreviewHandle,
    PreviewSurfaceInterface,
)

# Public API
__all__ = [
    "HtmlPreviewSurface",
    "MockPreviewSurface",
    "PreviewBinder",
    "PreviewError",
    "PreviewHandle",
    "PreviewSurfaceInterface",
]
