"""
Draft Controller

Single source of truth for a pending video upload.

The rest of the form only renders what this controller holds. Every change
to the draft goes through one of its operations:
- Field edits (title, description), visibility toggle
- Tag and metadata add/remove
- File selection (derives the title, drives the preview)
- Commit (hand-off to the submission delegate) and discard

Default visibility is fetched once per session in the background. The
result is applied only while the session that requested it is still alive
and only if the user has not set visibility by hand.
"""

import logging
import threading
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from config.settings import (
    DEFAULT_VISIBILITY_PLACEHOLDER,
    DRAFT_ORIGIN_KEY,
    DRAFT_ORIGIN_VALUE,
    SETTINGS_FETCH_TIMEOUT,
)
from core.session_task import SessionTask, SessionToken
from draft.constants import EDITABLE_TEXT_FIELDS, SelectionPhase, SessionState
from draft.models.draft import Draft, MetadataEntry, SelectedFile
from draft.utils.draft_utils import derive_title
from preferences.interfaces.settings_lookup_interface import SettingsLookupInterface
from preview.interfaces.preview_surface_interface import PreviewError, PreviewHandle
from submission.interfaces.submission_interface import (
    SubmissionDelegateInterface,
    SubmissionError,
    SubmissionResult,
)

if TYPE_CHECKING:
    from preview.controllers.preview_binder import PreviewBinder


class DraftStateError(Exception):
    """Raised when an operation is not valid in the current session state"""

    def __init__(self, message: str, state: SessionState):
        super().__init__(message)
        self.state = state


class DraftController:
    """
    Owns the draft of one upload form session.

    Usage:
        controller = DraftController(lookup, binder, delegate, on_refresh=reload_list)
        controller.initialize()
        controller.select_file(SelectedFile.from_path("beach-trip.mov"))
        controller.add_tag("vacation")
        controller.set_visibility(False)
        result = controller.commit()
    """

    def __init__(
        self,
        settings_lookup: SettingsLookupInterface,
        preview_binder: "PreviewBinder",
        delegate: SubmissionDelegateInterface,
        on_refresh: Optional[Callable[[], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize controller (no draft exists until initialize()).

        Args:
            settings_lookup: Source of the default visibility
            preview_binder: Binds selected files to the preview surface
            delegate: Performs the upload on commit
            on_refresh: Host callback, called after a draft is accepted
            on_close: Host callback, called when the form should close
        """
        self.logger = logging.getLogger(__name__)
        self.settings_lookup = settings_lookup
        self.preview_binder = preview_binder
        self.delegate = delegate
        self.on_refresh = on_refresh
        self.on_close = on_close

        self.state = SessionState.IDLE
        self._draft: Optional[Draft] = None
        self._file: Optional[SelectedFile] = None
        self._selection_phase = SelectionPhase.EMPTY
        self._preview_error: Optional[str] = None
        self._visibility_edited = False

        self._session: Optional[SessionToken] = None
        self._settings_task: Optional[SessionTask] = None

        # Serializes user operations against the settings resolution
        self._lock = threading.Lock()

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self) -> None:
        """
        Create the draft and start the default-visibility fetch.

        Raises:
            DraftStateError: If called more than once
        """
        with self._lock:
            if self.state != SessionState.IDLE:
                raise DraftStateError(
                    f"Cannot initialize: session is {self.state.value}",
                    self.state,
                )

            self._draft = Draft(
                visibility=DEFAULT_VISIBILITY_PLACEHOLDER,
                metadata=[MetadataEntry(DRAFT_ORIGIN_KEY, DRAFT_ORIGIN_VALUE)],
            )
            self._session = SessionToken()
            self.state = SessionState.ACTIVE

            self._settings_task = SessionTask(
                name="SettingsFetch",
                token=self._session,
                work=self.settings_lookup.get_default_visibility,
                on_success=self._on_settings_resolved,
                on_failure=self._on_settings_failed,
            )

        self.logger.info(f"Draft session started ({self._session})")
        self._settings_task.start()

    def discard(self) -> None:
        """
        Drop the draft and its preview. Safe to call more than once.

        A settings fetch still in flight becomes a no-op.
        """
        with self._lock:
            if self.state == SessionState.DISCARDED:
                return

            if self._session is not None:
                self._session.cancel()

            self.state = SessionState.DISCARDED
            self._draft = None
            self._file = None
            self.preview_binder.close()

        self.logger.info("Draft discarded")

    def cancel(self) -> None:
        """User cancelled the form: discard the draft and close"""
        self.discard()
        if self.on_close:
            self.on_close()

    def wait_for_settings(self, timeout: float = SETTINGS_FETCH_TIMEOUT) -> bool:
        """
        Block until the default-visibility fetch has resolved.

        Returns:
            True if it resolved within timeout
        """
        if self._settings_task is None:
            return False
        return self._settings_task.wait(timeout)

    # =========================================================================
    # FIELD OPERATIONS
    # =========================================================================

    def set_field(self, name: str, value: str) -> None:
        """
        Set the title or description. Content is not validated.

        Raises:
            ValueError: If name is not an editable text field
        """
        if name not in EDITABLE_TEXT_FIELDS:
            raise ValueError(f"Unknown field: {name}")

        with self._lock:
            self._require_active(f"set {name}")
            setattr(self._draft, name, value)

        self.logger.debug(f"Field {name} set")

    def set_visibility(self, value: bool) -> None:
        """Set visibility; later settings results no longer override it"""
        with self._lock:
            self._require_active("set visibility")
            self._draft.visibility = bool(value)
            self._visibility_edited = True

        self.logger.debug(f"Visibility set to {bool(value)}")

    def add_tag(self, tag: str) -> None:
        """Append a tag (empty tags are ignored)"""
        if not tag:
            return

        with self._lock:
            self._require_active("add tag")
            self._draft.tags.append(tag)

    def remove_tag(self, tag: str) -> None:
        """Remove every occurrence of tag"""
        with self._lock:
            self._require_active("remove tag")
            self._draft.tags = [t for t in self._draft.tags if t != tag]

    def add_metadata(self, pair: Any) -> None:
        """
        Append a metadata entry (empty pairs are ignored).

        Args:
            pair: MetadataEntry, (key, value) or {"key": ..., "value": ...}
        """
        if not pair:
            return

        entry = MetadataEntry.coerce(pair)
        with self._lock:
            self._require_active("add metadata")
            self._draft.metadata.append(entry)

    def remove_metadata(self, pair: Any) -> None:
        """Remove every entry structurally equal to pair (empty pairs are ignored)"""
        if not pair:
            return

        entry = MetadataEntry.coerce(pair)
        with self._lock:
            self._require_active("remove metadata")
            self._draft.metadata = [m for m in self._draft.metadata if m != entry]

    # =========================================================================
    # FILE SELECTION
    # =========================================================================

    def select_file(self, file: SelectedFile) -> Optional[PreviewHandle]:
        """
        Make file the selected file and preview it.

        The title is replaced by the file's base name without its final
        extension. If the file cannot be previewed the selection and title
        still stand; preview_error describes the problem.

        Returns:
            The new preview handle, or None if previewing failed
        """
        if file is None:
            raise ValueError("select_file() needs a file")

        with self._lock:
            self._require_active("select file")

            self._file = file
            self._draft.title = derive_title(file.name)

            if self._selection_phase == SelectionPhase.EMPTY:
                self._selection_phase = SelectionPhase.FILE_CHOSEN

            self.logger.info(f"File selected: {file.name}")

            try:
                handle = self.preview_binder.bind(file)
            except PreviewError as e:
                self._preview_error = str(e)
                self.logger.error(f"Preview failed: {e}")
                return None

            self._preview_error = None
            return handle

    # =========================================================================
    # SUBMISSION
    # =========================================================================

    def commit(self) -> SubmissionResult:
        """
        Hand the draft to the submission delegate.

        The controller does not validate the draft; the delegate decides.
        On acceptance the delegate calls back, the draft is discarded and the
        host is asked to refresh. On rejection or failure the draft stays
        open for another attempt, including a failure the delegate reports
        through on_failed after submit() has returned.

        Raises:
            DraftStateError: If the session is not active (including while a
                previous commit is still in progress)
        """
        with self._lock:
            self._require_active("commit")

            draft = self._draft
            submission = {
                "file": self._file,
                "title": draft.title,
                "description": draft.description,
                "visibility": draft.visibility,
                "tags": list(draft.tags),
                "metadata": list(draft.metadata),
                "has_preview": self.has_preview,
            }
            self.state = SessionState.SUBMITTING

        self.logger.info(f"Committing draft: {draft.title!r}")

        try:
            result = self.delegate.submit(
                on_accepted=self._handle_accepted,
                on_closed=self._handle_closed,
                on_failed=self._handle_failed,
                **submission,
            )
        except SubmissionError as e:
            result = SubmissionResult(
                success=False,
                status=e.status,
                error_message=str(e),
            )
        except Exception:
            self._reopen()
            raise

        if not result.success:
            self.logger.error(
                f"Submission not accepted: {result.error_message} "
                f"(status: {result.status.value})",
            )
            self._reopen()

        return result

    # =========================================================================
    # STATE ACCESS
    # =========================================================================

    @property
    def draft(self) -> Optional[Draft]:
        """Copy of the current draft (None before initialize/after discard)"""
        with self._lock:
            if self._draft is None:
                return None
            return Draft(
                title=self._draft.title,
                description=self._draft.description,
                visibility=self._draft.visibility,
                tags=list(self._draft.tags),
                metadata=list(self._draft.metadata),
            )

    @property
    def tags(self) -> List[str]:
        draft = self.draft
        return draft.tags if draft else []

    @property
    def metadata(self) -> List[MetadataEntry]:
        draft = self.draft
        return draft.metadata if draft else []

    @property
    def selected_file(self) -> Optional[SelectedFile]:
        return self._file

    @property
    def selection_phase(self) -> SelectionPhase:
        return self._selection_phase

    @property
    def preview_handle(self) -> Optional[PreviewHandle]:
        return self.preview_binder.active_handle

    @property
    def preview_error(self) -> Optional[str]:
        return self._preview_error

    @property
    def has_preview(self) -> bool:
        """True if the selected file has a usable preview"""
        return self._preview_error is None and self.preview_binder.active_handle is not None

    @property
    def session_id(self) -> Optional[str]:
        return self._session.session_id if self._session else None

    def get_status(self) -> Dict[str, Any]:
        """
        Get current controller status.

        Returns:
            Dictionary with status information
        """
        draft = self.draft
        return {
            "state": self.state.value,
            "session_id": self.session_id,
            "selection_phase": self._selection_phase.value,
            "file": self._file.name if self._file else None,
            "has_preview": self.has_preview,
            "preview_error": self._preview_error,
            "visibility_edited": self._visibility_edited,
            "settings_resolved": bool(self._settings_task and self._settings_task.done),
            "draft": draft.to_dict() if draft else None,
        }

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _require_active(self, operation: str) -> None:
        """Raise unless the draft is editable (caller holds the lock)"""
        if self.state != SessionState.ACTIVE:
            raise DraftStateError(
                f"Cannot {operation}: session is {self.state.value}",
                self.state,
            )

    def _reopen(self) -> None:
        """Return to ACTIVE after a submission that was not accepted"""
        with self._lock:
            if self.state == SessionState.SUBMITTING:
                self.state = SessionState.ACTIVE

    def _handle_accepted(self) -> None:
        """Delegate accepted the draft"""
        self.logger.info("Draft accepted by delegate")
        self.discard()
        if self.on_refresh:
            self.on_refresh()

    def _handle_failed(self, error: SubmissionError) -> None:
        """Delegate failed after submit() returned: reopen the draft"""
        self.logger.error(
            f"Submission failed after hand-off: {error} (status: {error.status.value})",
        )
        self._reopen()

    def _handle_closed(self) -> None:
        """Delegate finished with the form"""
        if self.on_close:
            self.on_close()

    def _is_current(self, token: SessionToken) -> bool:
        return token is self._session and not token.cancelled

    def _on_settings_resolved(self, token: SessionToken, value: bool) -> None:
        """Apply the fetched default visibility (worker thread)"""
        with self._lock:
            if not self._is_current(token) or self._draft is None:
                self.logger.debug(f"Ignoring settings result for ended session {token}")
                return

            if self._visibility_edited:
                self.logger.info("Default visibility ignored: already set by user")
                return

            self._draft.visibility = bool(value)

        self.logger.info(f"Default visibility applied: {bool(value)}")

    def _on_settings_failed(self, token: SessionToken, error: Exception) -> None:
        """Settings fetch failed: keep the placeholder (worker thread)"""
        if not self._is_current(token):
            return
        self.logger.warning(
            f"Settings lookup failed, keeping default visibility "
            f"{DEFAULT_VISIBILITY_PLACEHOLDER}: {error}",
        )
