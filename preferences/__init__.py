"""
Preferences Module

Read-only lookup of the user's upload preferences.

Public API:
    - SettingsLookupInterface: Abstract lookup
    - SettingsLookupError: Lookup failure
    - create_settings_lookup: Factory function

Usage:
    from preferences import create_settings_lookup

    lookup = create_settings_lookup()
    public = lookup.get_default_visibility()
"""

from preferences.factory import create_settings_lookup
from preferences.interfaces.settings_lookup_interface import (
    SettingsLookupError,
    SettingsLookupInterface,
)

# Public API
__all__ = [
    "SettingsLookupError",
    "SettingsLookupInterface",
    "create_settings_lookup",
]
