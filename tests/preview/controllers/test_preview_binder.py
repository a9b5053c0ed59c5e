"""
Preview Binder Tests

Tests for PreviewBinder showing:
- Binding writes a revocable copy and reloads the surface
- Rebinding releases the superseded handle
- Unreadable files and failing surfaces fail the binding without leaking handles
- Disk-backed files are copied file to file
- close() removes every scratch file

To run:
    pytest tests/preview/controllers/test_preview_binder.py -v
"""

from pathlib import Path

import pytest

from draft.models.draft import SelectedFile
from preview.controllers.preview_binder import PreviewBinder
from preview.implementations.html_surface import HtmlPreviewSurface
from preview.implementations.mock_surface import MockPreviewSurface
from preview.interfaces.preview_surface_interface import PreviewError


class BrokenReloadSurface(MockPreviewSurface):
    """Surface whose page cannot be written"""

    def reload(self) -> None:
        super().reload()
        raise PermissionError("preview page is read-only")



@pytest.fixture
def surface():
    return MockPreviewSurface()


@pytest.fixture
def binder(surface, tmp_path):
    binder = PreviewBinder(surface, scratch_dir=tmp_path / "scratch")
    yield binder
    binder.close()


@pytest.mark.unit
def test_bind_creates_handle_and_reloads(binder, surface):
    """Test bind copies the bytes and points the surface at them."""
    handle = binder.bind(SelectedFile(name="clip.mp4", content=b"video-bytes"))

    assert handle.path.read_bytes() == b"video-bytes"
    assert handle.path.suffix == ".mp4"
    assert handle.uri.startswith("file://")
    assert handle.source_name == "clip.mp4"
    assert surface.calls == [("set_source", handle.uri), ("reload", handle.uri)]
    assert binder.active_handle is handle


@pytest.mark.unit
def test_bind_reads_from_disk(binder, tmp_path):
    """Test disk-backed files are previewed from a copy, not in place."""
    video = tmp_path / "holiday.mov"
    video.write_bytes(b"original")

    handle = binder.bind(SelectedFile.from_path(video))

    assert handle.path != video
    assert handle.path.read_bytes() == b"original"
    assert video.exists()


@pytest.mark.unit
def test_rebind_releases_previous(binder, surface):
    """Test only the newest handle stays active."""
    first = binder.bind(SelectedFile(name="a.mp4", content=b"a"))
    second = binder.bind(SelectedFile(name="b.mp4", content=b"b"))

    assert first.released is True
    assert not first.path.exists()
    assert second.released is False
    assert binder.active_handle is second
    assert surface.source == second.uri
    assert surface.reload_count == 2


@pytest.mark.unit
def test_unreadable_file_fails_binding(binder, surface, tmp_path):
    """Test a missing file raises PreviewError and leaves no active handle."""
    first = binder.bind(SelectedFile(name="a.mp4", content=b"a"))

    with pytest.raises(PreviewError):
        binder.bind(SelectedFile.from_path(tmp_path / "missing.mp4"))

    assert first.released is True
    assert binder.active_handle is None
    assert surface.showing_placeholder
    assert surface.reload_count == 1


@pytest.mark.unit
def test_release_is_idempotent(binder):
    """Test release can be called with or without an active handle."""
    binder.release()

    handle = binder.bind(SelectedFile(name="a.mp4", content=b"a"))
    binder.release()
    binder.release()
    handle.release()

    assert binder.active_handle is None
    assert handle.released is True


@pytest.mark.unit
def test_close_removes_private_scratch_dir(surface):
    """Test a binder owning its temp dir deletes it on close."""
    binder = PreviewBinder(surface)
    handle = binder.bind(SelectedFile(name="a.mp4", content=b"a"))
    scratch = handle.path.parent

    binder.close()

    assert not scratch.exists()
    assert surface.showing_placeholder


@pytest.mark.unit
def test_close_keeps_caller_scratch_dir(surface, tmp_path):
    """Test a caller-provided scratch dir is emptied but not deleted."""
    scratch = tmp_path / "keep"
    binder = PreviewBinder(surface, scratch_dir=scratch)
    handle = binder.bind(SelectedFile(name="a.mp4", content=b"a"))

    binder.close()

    assert scratch.exists()
    assert not Path(handle.path).exists()


@pytest.mark.unit
def test_names_with_directories_stay_in_scratch(binder, tmp_path):
    """Test the copy lands in the scratch dir whatever the file name holds."""
    handle = binder.bind(SelectedFile(name="../../escape.mp4", content=b"x"))

    assert handle.path.parent == tmp_path / "scratch"


@pytest.mark.unit
def test_disk_file_copied_without_loading(binder, tmp_path, monkeypatch):
    """Test a disk-backed file is copied file to file, not read into memory."""
    video = tmp_path / "long-hike.mp4"
    video.write_bytes(b"0" * 8192)

    def no_read(self, *args, **kwargs):
        raise AssertionError(f"{self} read into memory")

    monkeypatch.setattr(Path, "read_bytes", no_read)
    handle = binder.bind(SelectedFile.from_path(video))
    monkeypatch.undo()

    assert handle.path.read_bytes() == b"0" * 8192


@pytest.mark.unit
def test_surface_failure_fails_binding(tmp_path):
    """Test a surface that cannot reload raises PreviewError and leaks nothing."""
    scratch = tmp_path / "scratch"
    surface = BrokenReloadSurface()
    binder = PreviewBinder(surface, scratch_dir=scratch)

    with pytest.raises(PreviewError):
        binder.bind(SelectedFile(name="b.mp4", content=b"b"))

    assert binder.active_handle is None
    assert list(scratch.iterdir()) == []
    assert surface.showing_placeholder


@pytest.mark.unit
def test_surface_failure_on_html_page(tmp_path):
    """Test an unwritable preview page fails binding and close() still works."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    surface = HtmlPreviewSurface(blocker / "preview.html")
    binder = PreviewBinder(surface, scratch_dir=tmp_path / "scratch")

    with pytest.raises(PreviewError):
        binder.bind(SelectedFile(name="a.mp4", content=b"abc"))

    assert binder.active_handle is None
    assert list((tmp_path / "scratch").iterdir()) == []

    binder.close()
