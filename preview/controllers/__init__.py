"""
Controllers Package

Preview binding coordinator.
"""

from preview.controllers.preview_binder import PreviewBinder

__all__ = [
    "PreviewBinder",
]
