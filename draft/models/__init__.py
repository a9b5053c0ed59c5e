"""
Models Package

Data classes for drafts and selected files.
"""

from draft.models.draft import Draft, MetadataEntry, SelectedFile

__all__ = [
    "Draft",
    "MetadataEntry",
    "SelectedFile",
]
