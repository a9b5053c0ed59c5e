"""
Mock Preview Surface Implementation

Records what the binder does to the surface so tests can inspect it.
"""

import logging
from typing import List, Optional, Tuple

from preview.interfaces.preview_surface_interface import PreviewSurfaceInterface


class MockPreviewSurface(PreviewSurfaceInterface):
    """Mock preview surface for testing"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.source: Optional[str] = None
        self.reload_count = 0

        # Track calls for testing: ("set_source", uri) / ("reload", None) / ...
        self.calls: List[Tuple[str, Optional[str]]] = []

    def set_source(self, uri: str) -> None:
        self.source = uri
        self.calls.append(("set_source", uri))

    def reload(self) -> None:
        self.reload_count += 1
        self.calls.append(("reload", self.source))
        self.logger.debug(f"[MOCK] Surface reloaded ({self.source})")

    def clear(self) -> None:
        self.source = None
        self.calls.append(("clear", None))

    @property
    def showing_placeholder(self) -> bool:
        return self.source is None
