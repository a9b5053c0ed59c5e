"""
YAML Settings Lookup

Reads upload preferences from a YAML file such as:

    default_public: false
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config.settings import SETTINGS_FILE
from preferences.interfaces.settings_lookup_interface import (
    SettingsLookupError,
    SettingsLookupInterface,
)

# Key holding the default visibility in the settings file
DEFAULT_PUBLIC_KEY = "default_public"


class YamlSettingsLookup(SettingsLookupInterface):
    """
    Settings lookup backed by a YAML file.

    The file is read on every lookup and never written.

    Usage:
        lookup = YamlSettingsLookup(Path("config/draft_settings.yaml"))
        public = lookup.get_default_visibility()
    """

    def __init__(self, settings_path: Optional[Path] = None):
        """
        Initialize lookup.

        Args:
            settings_path: Path to YAML settings file (None = config default)
        """
        self.logger = logging.getLogger(__name__)
        self.settings_path = Path(settings_path or SETTINGS_FILE)

    def _load(self) -> Dict[str, Any]:
        """Read and parse the settings file"""
        if not self.settings_path.exists():
            raise SettingsLookupError(
                f"Settings file not found: {self.settings_path}",
            )

        try:
            with open(self.settings_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise SettingsLookupError(
                f"Failed to read settings from {self.settings_path}: {e}",
            ) from e

        if not isinstance(data, dict):
            raise SettingsLookupError(
                f"Settings file must contain a mapping: {self.settings_path}",
            )

        return data

    def get_default_visibility(self) -> bool:
        """Read `default_public` from the settings file"""
        data = self._load()

        if DEFAULT_PUBLIC_KEY not in data:
            raise SettingsLookupError(
                f"'{DEFAULT_PUBLIC_KEY}' missing from {self.settings_path}",
            )

        value = data[DEFAULT_PUBLIC_KEY]
        if not isinstance(value, bool):
            raise SettingsLookupError(
                f"'{DEFAULT_PUBLIC_KEY}' must be true/false, got {value!r}",
            )

        self.logger.debug(f"Default visibility from settings: {value}")
        return value

    def __repr__(self) -> str:
        return f"YamlSettingsLookup(path={self.settings_path})"
