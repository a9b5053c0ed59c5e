"""
Mock Settings Lookup Implementation

Simulated settings lookup for testing without a settings file.
"""

import logging
import threading
from typing import Optional

from preferences.interfaces.settings_lookup_interface import (
    SettingsLookupError,
    SettingsLookupInterface,
)


class MockSettingsLookup(SettingsLookupInterface):
    """
    Mock settings lookup for testing.

    Useful for:
    - Unit tests
    - Holding the lookup open to test late resolutions
    - Simulating lookup failures
    """

    def __init__(
        self,
        default_visibility: bool = True,
        fail: bool = False,
        gate: Optional[threading.Event] = None,
    ):
        """
        Initialize mock lookup.

        Args:
            default_visibility: Value every lookup returns
            fail: If True, every lookup raises SettingsLookupError
            gate: If given, lookups block until the event is set

        Example:
            # Resolve only when the test says so
            gate = threading.Event()
            lookup = MockSettingsLookup(default_visibility=True, gate=gate)
            ...
            gate.set()
        """
        self.logger = logging.getLogger(__name__)
        self.default_visibility = default_visibility
        self.fail = fail
        self.gate = gate

        # Track calls for testing
        self.call_count = 0

    def get_default_visibility(self) -> bool:
        """Return the configured value (after the gate opens)"""
        self.call_count += 1

        if self.gate is not None:
            self.gate.wait()

        if self.fail:
            self.logger.warning("[MOCK] Settings lookup failed (simulated)")
            raise SettingsLookupError("Simulated settings lookup failure")

        self.logger.debug(f"[MOCK] Default visibility: {self.default_visibility}")
        return self.default_visibility
