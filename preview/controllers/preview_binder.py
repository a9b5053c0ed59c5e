"""
Preview Binder

Turns a freshly selected file into something the preview surface can play,
without handing the file's bytes to any upload code.

Each bind makes a private scratch copy of the bytes and points the surface at
its file:// URI. At most one handle is active: binding a new file revokes the
previous handle first.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Tuple
from uuid import uuid4

from config.settings import PREVIEW_SCRATCH_PREFIX
from draft.models.draft import SelectedFile
from draft.utils.draft_utils import base_name
from preview.interfaces.preview_surface_interface import (
    PreviewError,
    PreviewHandle,
    PreviewSurfaceInterface,
)


class PreviewBinder:
    """
    Binds selected files to a preview surface.

    Usage:
        binder = PreviewBinder(surface)
        handle = binder.bind(SelectedFile.from_path("clip.mp4"))
        ...
        binder.close()
    """

    def __init__(
        self,
        surface: PreviewSurfaceInterface,
        scratch_dir: Optional[Path] = None,
    ):
        """
        Initialize binder.

        Args:
            surface: Render target for previews
            scratch_dir: Directory for preview copies (None = private temp dir)
        """
        self.logger = logging.getLogger(__name__)
        self.surface = surface

        self._scratch_dir: Optional[Path] = Path(scratch_dir) if scratch_dir else None
        self._owns_scratch_dir = scratch_dir is None
        self._active: Optional[PreviewHandle] = None

    @property
    def active_handle(self) -> Optional[PreviewHandle]:
        return self._active

    def bind(self, file: SelectedFile) -> PreviewHandle:
        """
        Bind a file to the surface and reload it.

        Args:
            file: Newly selected file

        Returns:
            The new active PreviewHandle

        Raises:
            PreviewError: If the file cannot be copied or the surface cannot
                show it. The previous handle is released, no new handle is
                left behind and the surface shows its placeholder.
        """
        # Superseded handle goes first, whatever happens next
        self.release()

        handle, size = self._allocate(file)

        try:
            self.surface.set_source(handle.uri)
            self.surface.reload()
        except OSError as e:
            handle.release()
            self._clear_surface()
            raise PreviewError(f"Cannot show preview for {file.name}: {e}") from e

        self._active = handle

        self.logger.info(f"Preview bound: {file.name} ({size} bytes)")
        return handle

    def release(self) -> None:
        """Revoke the active handle, if any"""
        if self._active is None:
            return

        self.logger.debug(f"Releasing preview handle {self._active.handle_id}")
        self._active.release()
        self._active = None

    def close(self) -> None:
        """Release the active handle, clear the surface and drop scratch files"""
        self.release()
        self._clear_surface()

        if self._owns_scratch_dir and self._scratch_dir is not None:
            shutil.rmtree(self._scratch_dir, ignore_errors=True)
            self._scratch_dir = None

    def _allocate(self, file: SelectedFile) -> Tuple[PreviewHandle, int]:
        """Write the private copy backing a new handle"""
        handle_id = uuid4().hex[:12]
        path = None
        try:
            scratch = self._get_scratch_dir()
            path = scratch / f"{handle_id}{Path(base_name(file.name)).suffix}"
            size = file.copy_to(path)
        except (OSError, shutil.Error) as e:
            if path is not None:
                path.unlink(missing_ok=True)
            self._clear_surface()
            raise PreviewError(f"Cannot stage preview for {file.name}: {e}") from e

        handle = PreviewHandle(
            uri=path.resolve().as_uri(),
            path=path,
            source_name=file.name,
            handle_id=handle_id,
        )
        return handle, size

    def _clear_surface(self) -> None:
        """Put the surface back to its placeholder; failures are only logged"""
        try:
            self.surface.clear()
        except OSError as e:
            self.logger.error(f"Cannot clear preview surface: {e}")

    def _get_scratch_dir(self) -> Path:
        if self._scratch_dir is None:
            self._scratch_dir = Path(tempfile.mkdtemp(prefix=PREVIEW_SCRATCH_PREFIX))
        else:
            self._scratch_dir.mkdir(parents=True, exist_ok=True)
        return self._scratch_dir
