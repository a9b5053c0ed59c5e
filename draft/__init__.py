"""
Draft Module

In-memory model of a pending video upload and the controller that owns it.

Public API:
    - DraftController: Draft state controller
    - DraftStateError: Operation invalid for the session state
    - Draft, MetadataEntry, SelectedFile: Data classes
    - SelectionPhase, SessionState: Enums

Usage:
    from draft import SelectedFile
    from draft.factory import create_draft_controller

    controller = create_draft_controller()
    controller.initialize()
    controller.select_file(SelectedFile.from_path("beach-trip.mov"))
    result = controller.commit()
"""

from draft.constants import SelectionPhase, SessionState
from draft.controllers.draft_controller import DraftController, DraftStateError
from draft.models.draft import Draft, MetadataEntry, SelectedFile

# Public API
__all__ = [
    "Draft",
    "DraftController",
    "DraftStateError",
    "MetadataEntry",
    "SelectedFile",
    "SelectionPhase",
    "SessionState",
]
