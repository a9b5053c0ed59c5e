"""
Settings Lookup Interface

Abstract interface for reading the user's upload preferences.
The draft controller depends on this abstraction, not on where the
preferences are stored.
"""

from abc import ABC, abstractmethod


class SettingsLookupInterface(ABC):
    """
    Abstract base class for settings lookups.

    Implementations are read-only: a lookup never writes the settings it
    reads. Calls may block; the draft controller runs them off-thread.
    """

    @abstractmethod
    def get_default_visibility(self) -> bool:
        """
        Get the default visibility for new uploads.

        Returns:
            True if new uploads should be public by default

        Raises:
            SettingsLookupError: If the settings cannot be read

        Example:
            if lookup.get_default_visibility():
                print("Uploads are public by default")
        """


class SettingsLookupError(Exception):
    """
    Exception raised when settings cannot be read.

    Examples:
    - Settings file missing
    - Invalid YAML
    - Value has the wrong type
    """
