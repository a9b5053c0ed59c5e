"""
Submission Constants

Status codes and limits for handing drafts to an upload pipeline.
Following the same pattern as draft/constants.py for consistency.
"""

from enum import Enum

# =============================================================================
# SUBMISSION STATUS
# =============================================================================


class SubmissionStatus(Enum):
    """Submission outcome codes"""

    ACCEPTED = "accepted"
    FAILED = "failed"
    INVALID_DRAFT = "invalid_draft"  # Rejected before any bytes moved
    STORAGE_ERROR = "storage_error"


# =============================================================================
# LIBRARY LAYOUT
# =============================================================================

# Extension of the metadata sidecar written next to each accepted video
SIDECAR_EXTENSION = ".yaml"

# Prefix of generated video IDs
VIDEO_ID_PREFIX = "vid_"
