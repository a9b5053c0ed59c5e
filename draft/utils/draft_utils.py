"""
Draft Utilities

Helpers for deriving draft fields from user input.
"""

import re

# A trailing dot followed by at least one character that is neither a dot
# nor a path separator
_FINAL_EXTENSION = re.compile(r"\.[^/.]+$")


def base_name(filename: str) -> str:
    """
    Last path component of a file name (either separator style).

    Example:
        base_name("C:\\videos\\clip.mp4")  # "clip.mp4"
    """
    return re.split(r"[\\/]", filename)[-1]


def derive_title(filename: str) -> str:
    """
    Title for a freshly selected file: base name minus its final extension.

    Only the last extension is stripped, so dotted names keep their inner
    segments.

    Examples:
        derive_title("beach-trip.mov")  # "beach-trip"
        derive_title("clip.v2.mp4")     # "clip.v2"
        derive_title("README")          # "README"
    """
    return _FINAL_EXTENSION.sub("", base_name(filename))
