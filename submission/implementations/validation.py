"""
Draft Validation

Checks a delegate runs before accepting a draft. Shared by every delegate
so the real and mock pipelines reject the same drafts.
"""

from typing import TYPE_CHECKING, Optional

from config.settings import SUPPORTED_VIDEO_FORMATS
from submission.constants import SubmissionStatus
from submission.interfaces.submission_interface import SubmissionError

if TYPE_CHECKING:
    from draft.models.draft import SelectedFile


def validate_draft(
    file: Optional["SelectedFile"],
    title: str,
    has_preview: bool,
) -> None:
    """
    Reject drafts that must not be submitted.

    Raises:
        SubmissionError: With INVALID_DRAFT status
    """
    if file is None:
        raise SubmissionError(
            "No file selected",
            status=SubmissionStatus.INVALID_DRAFT,
        )

    if not title or not title.strip():
        raise SubmissionError(
            "Title is required",
            status=SubmissionStatus.INVALID_DRAFT,
        )

    if not has_preview:
        raise SubmissionError(
            f"File could not be previewed: {file.name}",
            status=SubmissionStatus.INVALID_DRAFT,
        )

    if file.extension not in SUPPORTED_VIDEO_FORMATS:
        raise SubmissionError(
            f"Unsupported format: {file.extension or '(none)'}",
            status=SubmissionStatus.INVALID_DRAFT,
        )
