"""
Submission Factory

Factory pattern for creating submission delegates.

Automatically configures from environment variables:
- VIDEO_LIBRARY_PATH: Directory accepted drafts are stored in
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from config.settings import VIDEO_LIBRARY_PATH
from submission.implementations.library_delegate import LocalLibraryDelegate
from submission.implementations.mock_delegate import MockSubmissionDelegate
from submission.interfaces.submission_interface import SubmissionDelegateInterface

# Type alias
DelegateMode = Literal["auto", "library", "mock"]


class SubmissionDelegateFactory:
    """
    Factory for creating submission delegates.

    Usage:
        # Library from environment
        delegate = SubmissionDelegateFactory.create_delegate()

        # Force mock for testing
        delegate = SubmissionDelegateFactory.create_delegate(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_delegate(
        cls,
        mode: DelegateMode = "auto",
        library_path: Optional[Path] = None,
    ) -> SubmissionDelegateInterface:
        """
        Create a submission delegate.

        Args:
            mode: "auto" (library if usable), "library" (force), "mock" (force)
            library_path: Override VIDEO_LIBRARY_PATH

        Returns:
            SubmissionDelegateInterface implementation

        Raises:
            RuntimeError: If mode="library" but the directory is unusable
        """
        path = Path(library_path or VIDEO_LIBRARY_PATH)

        if mode == "mock":
            cls._logger.info("Creating Mock Submission Delegate (forced)")
            return MockSubmissionDelegate()

        if mode == "library":
            if not cls.is_library_available(path):
                raise RuntimeError(f"Video library not usable: {path}")
            cls._logger.info("Creating Local Library Delegate (forced)")
            return LocalLibraryDelegate(path)

        # mode == "auto" - library first, fall back to mock
        if cls.is_library_available(path):
            cls._logger.info("Creating Local Library Delegate (auto-detected)")
            return LocalLibraryDelegate(path)

        cls._logger.warning(
            f"Video library {path} not usable, using Mock Submission Delegate",
        )
        return MockSubmissionDelegate()

    @classmethod
    def is_library_available(cls, library_path: Path) -> bool:
        """
        Check if the library directory exists (or can be created) and is a directory.

        Returns:
            True if the library can receive videos
        """
        try:
            library_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            cls._logger.debug(f"Cannot create {library_path}: {e}")
            return False
        return library_path.is_dir()


# Convenience function for quick creation
def create_delegate(
    force_mock: bool = False,
    library_path: Optional[Path] = None,
) -> SubmissionDelegateInterface:
    """
    Quick delegate creation with simple mock override.

    Args:
        force_mock: If True, always use mock
        library_path: Override VIDEO_LIBRARY_PATH

    Returns:
        SubmissionDelegateInterface
    """
    mode = "mock" if force_mock else "auto"
    return SubmissionDelegateFactory.create_delegate(mode=mode, library_path=library_path)
