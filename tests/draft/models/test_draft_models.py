"""
Draft Model Tests

Tests for SelectedFile, MetadataEntry and Draft.

To run:
    pytest tests/draft/models/test_draft_models.py -v
"""

from pathlib import Path

import pytest

from draft.models.draft import Draft, MetadataEntry, SelectedFile

# =============================================================================
# SELECTED FILE TESTS
# =============================================================================


@pytest.mark.unit
def test_selected_file_in_memory(tmp_path):
    """Test in-memory content is copied as-is."""
    file = SelectedFile(name="clip.MP4", content=b"abc")

    assert file.copy_to(tmp_path / "copy.mp4") == 3
    assert (tmp_path / "copy.mp4").read_bytes() == b"abc"
    assert file.size == 3
    assert file.extension == ".mp4"


@pytest.mark.unit
def test_selected_file_from_path(tmp_path):
    """Test disk-backed files are copied from their path."""
    video = tmp_path / "holiday.mov"
    video.write_bytes(b"12345")

    file = SelectedFile.from_path(str(video))

    assert file.name == "holiday.mov"
    assert isinstance(file.path, Path)
    assert file.size == 5
    assert file.copy_to(tmp_path / "copy.mov") == 5
    assert (tmp_path / "copy.mov").read_bytes() == b"12345"


@pytest.mark.unit
def test_selected_file_missing_path(tmp_path):
    """Test an unreadable file raises OSError and has no size."""
    file = SelectedFile.from_path(tmp_path / "nope.mp4")

    assert file.size is None
    with pytest.raises(OSError):
        file.copy_to(tmp_path / "copy.mp4")


@pytest.mark.unit
def test_selected_file_without_source(tmp_path):
    """Test a handle with neither content nor path is unreadable."""
    with pytest.raises(OSError):
        SelectedFile(name="ghost.mp4").copy_to(tmp_path / "copy.mp4")


# =============================================================================
# METADATA ENTRY TESTS
# =============================================================================


@pytest.mark.unit
def test_metadata_entry_structural_equality():
    """Test entries with the same key and value are equal."""
    assert MetadataEntry("a", "1") == MetadataEntry("a", "1")
    assert MetadataEntry("a", "1") != MetadataEntry("a", "2")


@pytest.mark.unit
@pytest.mark.parametrize(
    "pair",
    [
        MetadataEntry("camera", "gopro"),
        ("camera", "gopro"),
        ["camera", "gopro"],
        {"key": "camera", "value": "gopro"},
    ],
)
def test_metadata_entry_coerce(pair):
    """Test every supported pair shape normalizes to the same entry."""
    assert MetadataEntry.coerce(pair) == MetadataEntry("camera", "gopro")


@pytest.mark.unit
@pytest.mark.parametrize("pair", ["camera", ("a", "b", "c"), {"key": "only"}, 42])
def test_metadata_entry_coerce_rejects(pair):
    """Test unsupported shapes raise TypeError."""
    with pytest.raises(TypeError):
        MetadataEntry.coerce(pair)


# =============================================================================
# DRAFT TESTS
# =============================================================================


@pytest.mark.unit
def test_draft_to_dict_is_plain_data():
    """Test snapshots contain copies and plain dictionaries."""
    draft = Draft(title="t", tags=["a"], metadata=[MetadataEntry("k", "v")])

    data = draft.to_dict()
    data["tags"].append("b")

    assert data["metadata"] == [{"key": "k", "value": "v"}]
    assert draft.tags == ["a"]
