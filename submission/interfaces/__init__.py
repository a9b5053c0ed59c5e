"""
Interfaces Package

Abstract interfaces for submission delegates.
"""

from submission.interfaces.submission_interface import (
    SubmissionDelegateInterface,
    SubmissionError,
    SubmissionResult,
)

__all__ = [
    "SubmissionDelegateInterface",
    "SubmissionError",
    "SubmissionResult",
]
