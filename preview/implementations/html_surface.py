"""
HTML Preview Surface

Renders the preview as a small HTML5 page that any browser can open.
Shows a placeholder prompt until a source is set.
"""

import html
import logging
from pathlib import Path
from typing import Optional

from config.settings import PREVIEW_PAGE_PATH
from preview.interfaces.preview_surface_interface import PreviewSurfaceInterface

PLACEHOLDER_TEXT = "Drop a video file to preview it"

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Upload a video</title></head>
<body>
{body}
</body>
</html>
"""


class HtmlPreviewSurface(PreviewSurfaceInterface):
    """
    Preview surface backed by an HTML file.

    Usage:
        surface = HtmlPreviewSurface(Path("preview_page/preview.html"))
        surface.set_source("file:///tmp/clip.mp4")
        surface.reload()
    """

    def __init__(self, page_path: Optional[Path] = None):
        self.logger = logging.getLogger(__name__)
        self.page_path = Path(page_path or PREVIEW_PAGE_PATH)
        self.source: Optional[str] = None
        self.render_count = 0

    def set_source(self, uri: str) -> None:
        self.source = uri

    def reload(self) -> None:
        """Write the page for the current source"""
        if self.source:
            body = (
                '<video controls width="640">\n'
                f'  <source src="{html.escape(self.source, quote=True)}">\n'
                "</video>"
            )
        else:
            body = f"<p>{html.escape(PLACEHOLDER_TEXT)}</p>"

        self.page_path.parent.mkdir(parents=True, exist_ok=True)
        self.page_path.write_text(_PAGE_TEMPLATE.format(body=body), encoding="utf-8")
        self.render_count += 1

        self.logger.debug(f"Preview page rendered: {self.page_path}")

    def clear(self) -> None:
        self.source = None
        self.reload()
