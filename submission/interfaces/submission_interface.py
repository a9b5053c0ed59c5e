"""
Submission Delegate Interface

Abstract interface for the component that performs the durable upload of a
finished draft. The draft controller depends on this abstraction, not on any
concrete upload pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from submission.constants import SubmissionStatus

if TYPE_CHECKING:
    from draft.models.draft import MetadataEntry, SelectedFile


@dataclass
class SubmissionResult:
    """
    Result of a submission.

    Attributes:
        success: True if the draft was accepted
        video_id: Identifier assigned by the pipeline (if accepted)
        status: Submission status code
        error_message: Error description (if rejected or failed)
        upload_duration: Time taken in seconds
        file_size: Size of submitted file in bytes
    """

    success: bool
    video_id: Optional[str] = None
    status: SubmissionStatus = SubmissionStatus.ACCEPTED
    error_message: Optional[str] = None
    upload_duration: float = 0.0
    file_size: int = 0


class SubmissionDelegateInterface(ABC):
    """
    Abstract base class for submission delegates.

    A delegate owns everything the draft controller does not:
    - Rejecting incomplete drafts (no file, empty title, no preview)
    - Moving the bytes
    - Reporting progress and errors on its own surface
    - Calling on_accepted once the draft is durably accepted, then
      on_closed to dismiss the form

    A rejected or failed submission calls neither callback, so the form
    stays open for another attempt. A delegate that returns success before
    the transfer finishes reports a later failure through on_failed.
    """

    @abstractmethod
    def submit(
        self,
        file: Optional["SelectedFile"],
        title: str,
        description: str,
        visibility: bool,
        tags: List[str],
        metadata: List["MetadataEntry"],
        on_accepted: Callable[[], None],
        on_closed: Callable[[], None],
        has_preview: bool = True,
        on_failed: Optional[Callable[["SubmissionError"], None]] = None,
    ) -> SubmissionResult:
        """
        Submit a finished draft.

        Args:
            file: Selected file (None if the user never picked one)
            title: Video title
            description: Video description
            visibility: True for public
            tags: Tags in draft order
            metadata: Metadata entries in draft order
            on_accepted: Called once the draft has been durably accepted
            on_closed: Called after acceptance to dismiss the form
            has_preview: False if the file could not be previewed
            on_failed: Called with the error if a submission that returned
                success fails before acceptance

        Returns:
            SubmissionResult with success status and details

        Example:
            result = delegate.submit(
                file=SelectedFile.from_path("beach-trip.mov"),
                title="beach-trip",
                description="",
                visibility=False,
                tags=["vacation"],
                metadata=[MetadataEntry("Upload source", "Python")],
                on_accepted=refresh_list,
                on_closed=close_form,
            )
        """


class SubmissionError(Exception):
    """
    Exception raised for submission-related errors.

    Examples:
    - Draft incomplete
    - Library directory not writable
    """

    def __init__(
        self,
        message: str,
        status: SubmissionStatus = SubmissionStatus.FAILED,
    ):
        super().__init__(message)
        self.status = status
