"""
Draft Models

Data classes for a video draft: the selected file, structured metadata
entries and the editable draft itself.
"""

import shutil
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class SelectedFile:
    """
    A locally chosen video file.

    Either `content` (bytes already in memory) or `path` (file on disk)
    provides the bytes. The draft only holds the handle; it never reads the
    bytes itself.
    """

    name: str
    content: Optional[bytes] = None
    path: Optional[Path] = None

    def __post_init__(self):
        """Ensure path is a Path object"""
        if self.path is not None and not isinstance(self.path, Path):
            self.path = Path(self.path)

    @classmethod
    def from_path(cls, path) -> "SelectedFile":
        """Build a handle for a file on disk (bytes read lazily)"""
        path = Path(path)
        return cls(name=path.name, path=path)

    @property
    def size(self) -> Optional[int]:
        """Size in bytes, or None if it cannot be determined"""
        if self.content is not None:
            return len(self.content)
        if self.path is not None:
            try:
                return self.path.stat().st_size
            except OSError:
                return None
        return None

    @property
    def extension(self) -> str:
        """Lower-cased final extension including the dot ("" if none)"""
        return Path(self.name).suffix.lower()

    def copy_to(self, dest: Path) -> int:
        """
        Copy the file's bytes to dest.

        Disk-backed files are copied file to file, never loaded into memory.

        Returns:
            Number of bytes written

        Raises:
            OSError: If the file cannot be read, has no byte source or dest
                cannot be written
        """
        dest = Path(dest)
        if self.content is not None:
            dest.write_bytes(self.content)
        elif self.path is not None:
            try:
                shutil.copyfile(self.path, dest)
            except shutil.Error as e:
                raise OSError(f"Cannot copy {self.path}: {e}") from e
        else:
            raise OSError(f"No byte source for file: {self.name}")
        return dest.stat().st_size


@dataclass(frozen=True)
class MetadataEntry:
    """
    One (key, value) metadata pair.

    Equality is structural: two entries with the same key and value are
    indistinguishable, including for removal.
    """

    key: str
    value: str

    @classmethod
    def coerce(cls, pair: Any) -> "MetadataEntry":
        """
        Normalize a pair given as MetadataEntry, (key, value) or mapping.

        Raises:
            TypeError: If pair has none of the supported shapes
        """
        if isinstance(pair, cls):
            return pair
        if isinstance(pair, Mapping):
            if "key" not in pair or "value" not in pair:
                raise TypeError(f"Metadata mapping needs 'key' and 'value': {pair!r}")
            return cls(key=str(pair["key"]), value=str(pair["value"]))
        if isinstance(pair, (tuple, list)) and len(pair) == 2:
            return cls(key=str(pair[0]), value=str(pair[1]))
        raise TypeError(f"Unsupported metadata pair: {pair!r}")

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value}


@dataclass
class Draft:
    """
    The in-progress description of a video upload.

    Owned by DraftController; mutate it only through the controller.
    """

    title: str = ""
    description: str = ""
    visibility: bool = True
    tags: List[str] = field(default_factory=list)
    metadata: List[MetadataEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data snapshot (copies, safe to hand out)"""
        return {
            "title": self.title,
            "description": self.description,
            "visibility": self.visibility,
            "tags": list(self.tags),
            "metadata": [entry.to_dict() for entry in self.metadata],
        }
