"""
Utils Package

Draft helper functions.
"""

from draft.utils.draft_utils import base_name, derive_title

__all__ = [
    "base_name",
    "derive_title",
]
