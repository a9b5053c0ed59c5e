"""
Implementations Package

Concrete settings lookup implementations.
"""

from preferences.implementations.mock_settings import MockSettingsLookup
from preferences.implementations.yaml_settings import YamlSettingsLookup

__all__ = [
    "MockSettingsLookup",
    "YamlSettingsLookup",
]
