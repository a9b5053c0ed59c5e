"""
Draft Constants

Enums and fixed values for the draft form session.
Configurable values (origin metadata, placeholder visibility) live in
config/settings.py.
"""

from enum import Enum

# =============================================================================
# SESSION STATES
# =============================================================================


class SessionState(Enum):
    """Lifecycle of a draft controller"""

    IDLE = "idle"  # Created, initialize() not called yet
    ACTIVE = "active"  # Draft exists and is editable
    SUBMITTING = "submitting"  # Handed to the submission delegate
    DISCARDED = "discarded"  # Terminal, no further operations


class SelectionPhase(Enum):
    """
    Whether a file has been chosen at least once.

    Only drives what the preview surface shows; never used for validation.
    """

    EMPTY = "empty"
    FILE_CHOSEN = "file_chosen"


# =============================================================================
# EDITABLE FIELDS
# =============================================================================

# Text fields set_field() accepts
EDITABLE_TEXT_FIELDS = ("title", "description")
