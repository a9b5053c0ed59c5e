"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (API keys, credentials) should be in .env, NOT here
- Import these settings in modules: from config.settings import SETTINGS_FILE
- Every value can be overridden from the environment (or .env)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment ("1", "true", "yes", "on")"""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# DRAFT CONFIGURATION
# =============================================================================

# Metadata entry seeded into every new draft to identify where it came from
DRAFT_ORIGIN_KEY = os.getenv("DRAFT_ORIGIN_KEY", "Upload source")
DRAFT_ORIGIN_VALUE = os.getenv("DRAFT_ORIGIN_VALUE", "Python")

# Visibility used until the settings lookup resolves (or if it fails)
DEFAULT_VISIBILITY_PLACEHOLDER = _env_bool("DEFAULT_VISIBILITY_PLACEHOLDER", True)

# =============================================================================
# SETTINGS LOOKUP CONFIGURATION
# =============================================================================

# YAML file holding the user's upload preferences (default_public: true/false)
SETTINGS_FILE = Path(os.getenv("SETTINGS_FILE", "config/draft_settings.yaml"))

# Maximum time wait_for_settings() blocks by default (seconds)
SETTINGS_FETCH_TIMEOUT = float(os.getenv("SETTINGS_FETCH_TIMEOUT", "5.0"))

# =============================================================================
# PREVIEW CONFIGURATION
# =============================================================================

# HTML page the preview surface renders into
PREVIEW_PAGE_PATH = Path(os.getenv("PREVIEW_PAGE_PATH", "./preview_page/preview.html"))

# Prefix of the private scratch directory holding preview copies
PREVIEW_SCRATCH_PREFIX = "draft-preview-"

# =============================================================================
# SUBMISSION CONFIGURATION
# =============================================================================

# Local directory the library delegate hands accepted drafts to
VIDEO_LIBRARY_PATH = Path(os.getenv("VIDEO_LIBRARY_PATH", "./video_library"))

# Extensions the submission delegates accept
SUPPORTED_VIDEO_FORMATS = [".mp4", ".avi", ".mov", ".mkv", ".webm"]

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
