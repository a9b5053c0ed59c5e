"""
Submission Module

Hands finished drafts to an upload pipeline.

Public API:
    - SubmissionDelegateInterface: Abstract delegate
    - SubmissionResult: Submission outcome
    - SubmissionStatus: Status codes
    - SubmissionError: Submission failure
    - create_delegate: Factory function

Usage:
    from submission import create_delegate

    delegate = create_delegate()
    result = delegate.submit(file=..., title=..., ...)
"""

from submission.constants import SubmissionStatus
from submission.factory import create_delegate
from submission.interfaces.submission_interface import (
    SubmissionDelegateInterface,
    SubmissionError,
    SubmissionResult,
)

# Public API
__all__ = [
    "SubmissionDelegateInterface",
    "SubmissionError",
    "SubmissionResult",
    "SubmissionStatus",
    "create_delegate",
]
