"""
Settings Lookup Factory

Factory pattern for creating settings lookup implementations.
Follows same pattern as submission/factory.py for consistency.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from config.settings import DEFAULT_VISIBILITY_PLACEHOLDER, SETTINGS_FILE
from preferences.implementations.mock_settings import MockSettingsLookup
from preferences.implementations.yaml_settings import YamlSettingsLookup
from preferences.interfaces.settings_lookup_interface import SettingsLookupInterface

# Type alias
LookupMode = Literal["auto", "yaml", "mock"]


def create_settings_lookup(
    mode: LookupMode = "auto",
    settings_path: Optional[Path] = None,
) -> SettingsLookupInterface:
    """
    Create a settings lookup.

    Args:
        mode: "auto" (YAML if file exists), "yaml" (force file), "mock"
        settings_path: Override SETTINGS_FILE from config

    Returns:
        SettingsLookupInterface implementation

    Example:
        lookup = create_settings_lookup()
        lookup = create_settings_lookup(mode="mock")
    """
    logger = logging.getLogger(__name__)
    path = Path(settings_path or SETTINGS_FILE)

    if mode == "mock":
        logger.info("Creating Mock Settings Lookup (forced)")
        return MockSettingsLookup(default_visibility=DEFAULT_VISIBILITY_PLACEHOLDER)

    if mode == "yaml":
        logger.info(f"Creating YAML Settings Lookup (forced, {path})")
        return YamlSettingsLookup(path)

    # mode == "auto" - use the file when there is one
    if path.exists():
        logger.info(f"Creating YAML Settings Lookup (auto-detected, {path})")
        return YamlSettingsLookup(path)

    logger.warning(f"Settings file {path} not found, using Mock Settings Lookup")
    return MockSettingsLookup(default_visibility=DEFAULT_VISIBILITY_PLACEHOLDER)
