"""
Mock Submission Delegate Implementation

Simulated upload pipeline for testing without touching disk.
"""

import logging
import random
import time
from typing import Callable, List, Optional
from uuid import uuid4

from submission.constants import VIDEO_ID_PREFIX, SubmissionStatus
from submission.implementations.validation import validate_draft
from submission.interfaces.submission_interface import (
    SubmissionDelegateInterface,
    SubmissionError,
    SubmissionResult,
)


class MockSubmissionDelegate(SubmissionDelegateInterface):
    """
    Mock submission delegate for testing.

    Runs the same draft validation as the real delegate, then records the
    submission instead of storing it. Useful for:
    - Unit tests
    - Development without a library directory
    - Simulating pipeline failures
    """

    def __init__(self, fail_rate: float = 0.0):
        """
        Initialize mock delegate.

        Args:
            fail_rate: Probability of a pipeline failure (0.0 to 1.0)

        Example:
            # Always succeeds
            delegate = MockSubmissionDelegate()

            # Always fails after validation
            delegate = MockSubmissionDelegate(fail_rate=1.0)
        """
        self.logger = logging.getLogger(__name__)
        self.fail_rate = fail_rate

        # Track accepted submissions for testing
        self.submission_history: list[dict] = []
        self.attempt_count = 0

        self.logger.info(f"Mock Submission Delegate initialized (fail_rate: {fail_rate})")

    def submit(
        self,
        file,
        title: str,
        description: str,
        visibility: bool,
        tags: List[str],
        metadata: list,
        on_accepted: Callable[[], None],
        on_closed: Callable[[], None],
        has_preview: bool = True,
        on_failed: Optional[Callable[[SubmissionError], None]] = None,
    ) -> SubmissionResult:
        """Validate and record the draft"""
        start_time = time.time()
        self.attempt_count += 1

        try:
            validate_draft(file, title, has_preview)

            if random.random() < self.fail_rate:
                raise SubmissionError(
                    "Simulated submission failure",
                    status=SubmissionStatus.FAILED,
                )

            video_id = f"{VIDEO_ID_PREFIX}mock_{uuid4().hex[:11]}"
            file_size = file.size or 0

            self.submission_history.append(
                {
                    "video_id": video_id,
                    "file": file,
                    "title": title,
                    "description": description,
                    "visibility": visibility,
                    "tags": list(tags),
                    "metadata": list(metadata),
                    "timestamp": time.time(),
                },
            )

            self.logger.info(f"[MOCK] Draft accepted: {video_id} ({title})")
            on_accepted()
            on_closed()

            return SubmissionResult(
                success=True,
                video_id=video_id,
                status=SubmissionStatus.ACCEPTED,
                upload_duration=time.time() - start_time,
                file_size=file_size,
            )

        except SubmissionError as e:
            self.logger.error(f"[MOCK] Submission rejected: {e}")

            return SubmissionResult(
                success=False,
                status=e.status,
                error_message=str(e),
                upload_duration=time.time() - start_time,
            )

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_last_submission(self) -> Optional[dict]:
        """
        Get most recent accepted submission.

        Returns:
            Last submission record, or None
        """
        return self.submission_history[-1] if self.submission_history else None

    def clear_history(self) -> None:
        """Clear submission history"""
        self.submission_history.clear()
        self.attempt_count = 0
