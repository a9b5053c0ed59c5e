#!/usr/bin/env python3
"""
Stage Video - Command Line Upload Form

Runs one upload form session without a GUI: selects a local video, renders
its preview page, applies the title/description/visibility/tags/metadata
given on the command line and submits the draft to the video library.

Usage:
    python scripts/stage_video.py beach-trip.mov
    python scripts/stage_video.py beach-trip.mov --tag vacation --private
    python scripts/stage_video.py clip.mp4 --title "My clip" --meta camera=gopro
    python scripts/stage_video.py clip.mp4 --mock          # Dry run, nothing stored

Exit code is 0 when the draft was accepted, 1 otherwise.
"""

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import LOG_DIR, LOG_LEVEL
from draft.controllers.draft_controller import DraftStateError
from draft.factory import create_draft_controller
from draft.models.draft import MetadataEntry, SelectedFile
from submission.factory import SubmissionDelegateFactory


def setup_logging(level: str = LOG_LEVEL, log_dir: Optional[Path] = LOG_DIR) -> None:
    """
    Setup logging to console and a daily rotating file.

    Falls back to console only if the log directory is not writable.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("%(message)s | %(name)s"))
    logger.addHandler(console_handler)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(log_dir / "stage-video.log"),
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    except OSError as e:
        logger.warning(f"Cannot write logs to {log_dir}: {e}")
        return

    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"),
    )
    logger.addHandler(file_handler)


def parse_meta(values: Optional[List[str]]) -> List[MetadataEntry]:
    """Turn KEY=VALUE strings into metadata entries"""
    entries = []
    for item in values or []:
        if "=" not in item:
            raise argparse.ArgumentTypeError(f"Metadata must be KEY=VALUE: {item}")
        key, value = item.split("=", 1)
        entries.append(MetadataEntry(key.strip(), value.strip()))
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Stage a local video and submit it to the video library",
        epilog="""
Examples:
  %(prog)s beach-trip.mov --tag vacation --private
  %(prog)s clip.mp4 --title "My clip" --meta camera=gopro --mock
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("video", type=Path, help="Video file to stage")
    parser.add_argument("--title", help="Title (default: file name without extension)")
    parser.add_argument("--description", default="", help="Description")
    parser.add_argument(
        "--tag",
        action="append",
        default=[],
        help="Tag to add (repeatable)",
    )
    parser.add_argument(
        "--meta",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Metadata entry to add (repeatable)",
    )

    visibility = parser.add_mutually_exclusive_group()
    visibility.add_argument(
        "--public",
        dest="visibility",
        action="store_const",
        const=True,
        help="Make the video public",
    )
    visibility.add_argument(
        "--private",
        dest="visibility",
        action="store_const",
        const=False,
        help="Make the video private",
    )

    parser.add_argument("--library", type=Path, help="Library directory")
    parser.add_argument("--preview-page", type=Path, help="Preview HTML page path")
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use mock settings and delegate (nothing is stored)",
    )
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    try:
        metadata = parse_meta(args.meta)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    setup_logging()
    logger = logging.getLogger(__name__)

    delegate = None
    if args.library and not args.mock:
        delegate = SubmissionDelegateFactory.create_delegate(
            mode="library",
            library_path=args.library,
        )

    controller = create_draft_controller(
        delegate=delegate,
        preview_page=args.preview_page,
        force_mock=args.mock,
        on_refresh=lambda: logger.info("Video list needs refresh"),
    )

    controller.initialize()
    if not controller.wait_for_settings():
        logger.warning("Settings lookup still pending, continuing with current default")

    try:
        controller.select_file(SelectedFile.from_path(args.video))
        if controller.preview_error:
            print(f"⚠️  Preview unavailable: {controller.preview_error}")

        if args.title is not None:
            controller.set_field("title", args.title)
        controller.set_field("description", args.description)
        if args.visibility is not None:
            controller.set_visibility(args.visibility)
        for tag in args.tag:
            controller.add_tag(tag)
        for entry in metadata:
            controller.add_metadata(entry)

        result = controller.commit()

    except DraftStateError as e:
        logger.error(f"Form session error: {e}")
        controller.discard()
        return 1

    if result.success:
        print(f"✅ Accepted: {result.video_id}")
        return 0

    print(f"❌ Not accepted: {result.error_message} ({result.status.value})")
    controller.cancel()
    return 1


if __name__ == "__main__":
    sys.exit(main())
