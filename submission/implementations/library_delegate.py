"""
Local Library Delegate

Hands accepted drafts to a local video library directory.

Each accepted draft becomes two files:
    <library>/<video_id><ext>    the video bytes
    <library>/<video_id>.yaml    title, description, visibility, tags, metadata
"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

import yaml

from config.settings import VIDEO_LIBRARY_PATH
from submission.constants import SIDECAR_EXTENSION, VIDEO_ID_PREFIX, SubmissionStatus
from submission.implementations.validation import validate_draft
from submission.interfaces.submission_interface import (
    SubmissionDelegateInterface,
    SubmissionError,
    SubmissionResult,
)


class LocalLibraryDelegate(SubmissionDelegateInterface):
    """
    Submission delegate writing into a local library directory.

    Usage:
        delegate = LocalLibraryDelegate(Path("./video_library"))
        result = delegate.submit(file=..., title=..., ...)
    """

    def __init__(self, library_path: Optional[Path] = None):
        """
        Initialize delegate.

        Args:
            library_path: Library directory (None = VIDEO_LIBRARY_PATH)
        """
        self.logger = logging.getLogger(__name__)
        self.library_path = Path(library_path or VIDEO_LIBRARY_PATH)

        self.logger.info(f"Local library delegate initialized ({self.library_path})")

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
        """Validate the draft and store it in the library"""
        start_time = time.time()
        file_size = 0

        try:
            validate_draft(file, title, has_preview)

            video_id = f"{VIDEO_ID_PREFIX}{uuid4().hex[:11]}"
            video_path = self.library_path / f"{video_id}{file.extension}"
            sidecar_path = self.library_path / f"{video_id}{SIDECAR_EXTENSION}"

            self.logger.info(f"Storing draft '{title}' as {video_path.name}")

            try:
                self.library_path.mkdir(parents=True, exist_ok=True)
                file_size = file.copy_to(video_path)

                record = self._build_record(
                    video_id, file.name, title, description, visibility, tags, metadata,
                )
                with open(sidecar_path, "w") as f:
                    yaml.safe_dump(record, f, default_flow_style=False, sort_keys=False)

            except OSError as e:
                # Leave nothing half-written behind
                for path in (video_path, sidecar_path):
                    path.unlink(missing_ok=True)
                raise SubmissionError(
                    f"Could not store video in {self.library_path}: {e}",
                    status=SubmissionStatus.STORAGE_ERROR,
                ) from e

            upload_duration = time.time() - start_time
            self.logger.info(
                f"✅ Draft accepted: {video_id} "
                f"({upload_duration:.1f}s, {file_size / (1024 * 1024):.1f} MB)",
            )

            on_accepted()
            on_closed()

            return SubmissionResult(
                success=True,
                video_id=video_id,
                status=SubmissionStatus.ACCEPTED,
                upload_duration=upload_duration,
                file_size=file_size,
            )

        except SubmissionError as e:
            self.logger.error(f"❌ Submission failed: {e} (status: {e.status.value})")

            return SubmissionResult(
                success=False,
                status=e.status,
                error_message=str(e),
                upload_duration=time.time() - start_time,
                file_size=file_size,
            )

    def _build_record(
        self,
        video_id: str,
        original_name: str,
        title: str,
        description: str,
        visibility: bool,
        tags: List[str],
        metadata: list,
    ) -> Dict[str, Any]:
        """Sidecar contents for one accepted draft"""
        return {
            "video_id": video_id,
            "original_name": original_name,
            "title": title,
            "description": description,
            "public": visibility,
            "tags": list(tags),
            "metadata": [entry.to_dict() for entry in metadata],
            "accepted_at": datetime.now().isoformat(timespec="seconds"),
        }

    def list_videos(self) -> List[Dict[str, Any]]:
        """
        Read back every sidecar in the library (oldest first).

        Returns:
            List of sidecar records
        """
        if not self.library_path.exists():
            return []

        records = []
        sidecars = sorted(
            self.library_path.glob(f"*{SIDECAR_EXTENSION}"),
            key=lambda p: p.stat().st_mtime,
        )
        for sidecar in sidecars:
            with open(sidecar, "r") as f:
                records.append(yaml.safe_load(f) or {})
        return records
