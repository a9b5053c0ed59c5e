"""
Draft Factory

Wires a DraftController to its collaborators.
Any collaborator not passed in is created from configuration by its own
module's factory.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from draft.controllers.draft_controller import DraftController
from preferences.factory import create_settings_lookup
from preferences.interfaces.settings_lookup_interface import SettingsLookupInterface
from preview.controllers.preview_binder import PreviewBinder
from preview.implementations.html_surface import HtmlPreviewSurface
from preview.interfaces.preview_surface_interface import PreviewSurfaceInterface
from submission.factory import create_delegate
from submission.interfaces.submission_interface import SubmissionDelegateInterface


def create_draft_controller(
    settings_lookup: Optional[SettingsLookupInterface] = None,
    surface: Optional[PreviewSurfaceInterface] = None,
    delegate: Optional[SubmissionDelegateInterface] = None,
    on_refresh: Optional[Callable[[], None]] = None,
    on_close: Optional[Callable[[], None]] = None,
    preview_page: Optional[Path] = None,
    force_mock: bool = False,
) -> DraftController:
    """
    Build a controller ready for initialize().

    Args:
        settings_lookup: Settings lookup (None = from config)
        surface: Preview surface (None = HTML page at preview_page)
        delegate: Submission delegate (None = from config)
        on_refresh: Host callback after an accepted submission
        on_close: Host callback when the form closes
        preview_page: HTML page path for the default surface
        force_mock: Use mock lookup and delegate

    Returns:
        Uninitialized DraftController

    Example:
        controller = create_draft_controller(on_refresh=reload_list)
        controller.initialize()
    """
    logger = logging.getLogger(__name__)

    if settings_lookup is None:
        settings_lookup = create_settings_lookup(mode="mock" if force_mock else "auto")
    if surface is None:
        surface = HtmlPreviewSurface(preview_page)
    if delegate is None:
        delegate = create_delegate(force_mock=force_mock)

    logger.debug(
        f"Draft controller wiring: {type(settings_lookup).__name__}, "
        f"{type(surface).__name__}, {type(delegate).__name__}",
    )

    return DraftController(
        settings_lookup=settings_lookup,
        preview_binder=PreviewBinder(surface),
        delegate=delegate,
        on_refresh=on_refresh,
        on_close=on_close,
    )
