"""
Implementations Package

Concrete preview surfaces.
"""

from preview.implementations.html_surface import HtmlPreviewSurface
from preview.implementations.mock_surface import MockPreviewSurface

__all__ = [
    "HtmlPreviewSurface",
    "MockPreviewSurface",
]
