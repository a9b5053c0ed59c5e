"""
HTML Preview Surface Tests

To run:
    pytest tests/preview/implementations/test_html_surface.py -v
"""

import pytest

from preview.implementations.html_surface import PLACEHOLDER_TEXT, HtmlPreviewSurface


@pytest.mark.unit
def test_reload_renders_video_tag(tmp_path):
    """Test a set source is rendered as an HTML5 video."""
    page = tmp_path / "page" / "preview.html"
    surface = HtmlPreviewSurface(page)

    surface.set_source("file:///tmp/clip.mp4")
    surface.reload()

    html = page.read_text(encoding="utf-8")
    assert "<video" in html
    assert 'src="file:///tmp/clip.mp4"' in html
    assert surface.render_count == 1


@pytest.mark.unit
def test_reload_without_source_shows_placeholder(tmp_path):
    """Test an empty surface renders the drop prompt."""
    page = tmp_path / "preview.html"
    surface = HtmlPreviewSurface(page)

    surface.reload()

    html = page.read_text(encoding="utf-8")
    assert PLACEHOLDER_TEXT in html
    assert "<video" not in html


@pytest.mark.unit
def test_clear_returns_to_placeholder(tmp_path):
    """Test clear() drops the source and re-renders."""
    page = tmp_path / "preview.html"
    surface = HtmlPreviewSurface(page)
    surface.set_source("file:///tmp/clip.mp4")
    surface.reload()

    surface.clear()

    assert surface.source is None
    assert PLACEHOLDER_TEXT in page.read_text(encoding="utf-8")


@pytest.mark.unit
def test_source_is_escaped(tmp_path):
    """Test URIs cannot break out of the src attribute."""
    page = tmp_path / "preview.html"
    surface = HtmlPreviewSurface(page)

    surface.set_source('file:///tmp/a"><script>.mp4')
    surface.reload()

    assert "<script>" not in page.read_text(encoding="utf-8")
