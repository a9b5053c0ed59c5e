"""
Draft Test Configuration and Fixtures

Shared fixtures for draft module tests.
"""

import shutil
import tempfile
import threading
from pathlib import Path

import pytest

from draft.controllers.draft_controller import DraftController
from draft.models.draft import SelectedFile
from preferences.implementations.mock_settings import MockSettingsLookup
from preview.controllers.preview_binder import PreviewBinder
from preview.implementations.mock_surface import MockPreviewSurface
from submission.implementations.mock_delegate import MockSubmissionDelegate

# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def mock_surface():
    """Provide a MockPreviewSurface recording every call."""
    return MockPreviewSurface()


@pytest.fixture
def scratch_dir():
    """
    Provide temporary directory for preview copies.

    Directory is automatically cleaned up after test.
    """
    temp_dir = Path(tempfile.mkdtemp())

    yield temp_dir

    # Cleanup
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


@pytest.fixture
def preview_binder(mock_surface, scratch_dir):
    """Provide PreviewBinder writing into the temporary scratch dir."""
    binder = PreviewBinder(mock_surface, scratch_dir=scratch_dir)
    yield binder
    binder.release()


@pytest.fixture
def settings_gate():
    """
    Provide an event holding the settings lookup open.

    Usage:
        def test_late(controller_factory, settings_gate):
            controller = controller_factory(gated=True)
            ...
            settings_gate.set()
    """
    gate = threading.Event()
    yield gate
    # Never leave a worker thread blocked
    gate.set()


@pytest.fixture
def mock_delegate():
    """Provide a MockSubmissionDelegate that always accepts valid drafts."""
    return MockSubmissionDelegate()


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================


@pytest.fixture
def controller_factory(preview_binder, mock_delegate, settings_gate, callback_tracker):
    """
    Provide a function building DraftControllers with mock collaborators.

    Args (of the returned function):
        default_visibility: Value the settings lookup resolves with
        fail: If True, the settings lookup fails
        gated: If True, the lookup blocks until settings_gate is set
        delegate: Replacement submission delegate

    Host callbacks are wired to callback_tracker ("refresh" / "close").
    """
    controllers = []

    def _create(default_visibility=True, fail=False, gated=False, delegate=None):
        lookup = MockSettingsLookup(
            default_visibility=default_visibility,
            fail=fail,
            gate=settings_gate if gated else None,
        )
        controller = DraftController(
            settings_lookup=lookup,
            preview_binder=preview_binder,
            delegate=delegate or mock_delegate,
            on_refresh=lambda: callback_tracker.track("refresh"),
            on_close=lambda: callback_tracker.track("close"),
        )
        controllers.append(controller)
        return controller

    yield _create

    for controller in controllers:
        controller.discard()


@pytest.fixture
def controller(controller_factory):
    """
    Provide an initialized controller whose settings lookup has resolved
    (default visibility True).
    """
    controller = controller_factory()
    controller.initialize()
    assert controller.wait_for_settings(timeout=2.0)
    return controller


# =============================================================================
# FILE FIXTURES
# =============================================================================


@pytest.fixture
def beach_trip_file():
    """In-memory selected file named beach-trip.mov."""
    return SelectedFile(name="beach-trip.mov", content=b"\x00\x00\x00\x18ftypqt  " * 64)


@pytest.fixture
def unreadable_file(scratch_dir):
    """Selected file pointing at a path that does not exist."""
    return SelectedFile.from_path(scratch_dir / "missing" / "gone.mp4")


# =============================================================================
# CALLBACK TRACKING FIXTURES
# =============================================================================


@pytest.fixture
def callback_tracker():
    """
    Provide helper for tracking callback calls.

    Usage:
        def test_callback(controller, callback_tracker):
            ...
            assert callback_tracker.was_called()
    """

    class CallbackTracker:
        def __init__(self):
            self.calls = []

        def track(self, *args, **kwargs):
            """Record a callback invocation"""
            self.calls.append({"args": args, "kwargs": kwargs})

        def was_called(self) -> bool:
            """Check if callback was called"""
            return len(self.calls) > 0

        def get_call_count(self) -> int:
            """Get number of times callback was called"""
            return len(self.calls)

        def names(self):
            """First positional argument of every call, in order"""
            return [call["args"][0] for call in self.calls if call["args"]]

        def reset(self):
            """Clear call history"""
            self.calls.clear()

    return CallbackTracker()


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers for draft tests.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Integration tests")
