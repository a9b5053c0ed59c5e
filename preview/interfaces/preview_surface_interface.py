"""
Preview Surface Interface

Abstract render target the preview binder writes a file reference into.
Reloading is the only capability the binder relies on; clearing returns the
surface to its "drop a file" placeholder.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from uuid import uuid4


@dataclass
class PreviewHandle:
    """
    Revocable, renderable reference to a selected file's bytes.

    Attributes:
        uri: file:// URI the surface renders
        path: Private scratch copy backing the URI
        source_name: Name of the file this handle previews
        handle_id: Unique identifier (for logs and tests)
    """

    uri: str
    path: Path
    source_name: str
    handle_id: str = field(default_factory=lambda: uuid4().hex[:12])
    released: bool = False

    def release(self) -> None:
        """Revoke the handle by deleting its scratch copy (idempotent)"""
        if self.released:
            return
        self.released = True
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logging.getLogger(__name__).warning(
                f"Could not remove preview copy {self.path}: {e}",
            )


class PreviewSurfaceInterface(ABC):
    """
    Abstract base class for preview surfaces.

    Any surface (HTML page, GUI widget, test double) must implement these
    methods.
    """

    @abstractmethod
    def set_source(self, uri: str) -> None:
        """
        Point the surface at a new video reference.

        Args:
            uri: Renderable reference (file:// URI)
        """

    @abstractmethod
    def reload(self) -> None:
        """Re-render the surface from its current source"""

    @abstractmethod
    def clear(self) -> None:
        """Drop the current source and show the placeholder"""


class PreviewError(Exception):
    """
    Exception raised when a preview cannot be bound.

    Examples:
    - Selected file unreadable
    - Scratch copy could not be written
    """
