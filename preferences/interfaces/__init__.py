"""
Interfaces Package

Abstract interfaces for settings lookups.
"""

from preferences.interfaces.settings_lookup_interface import (
    SettingsLookupError,
    SettingsLookupInterface,
)

__all__ = [
    "SettingsLookupError",
    "SettingsLookupInterface",
]
