"""
Implementations Package

Concrete submission delegates.
"""

from submission.implementations.library_delegate import LocalLibraryDelegate
from submission.implementations.mock_delegate import MockSubmissionDelegate

__all__ = [
    "LocalLibraryDelegate",
    "MockSubmissionDelegate",
]
