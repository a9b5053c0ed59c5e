"""
Controllers Package

Draft session coordinator.
"""

from draft.controllers.draft_controller import DraftController, DraftStateError

__all__ = [
    "DraftController",
    "DraftStateError",
]
