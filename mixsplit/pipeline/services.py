"""Entry points for the tracklist-to-CUE and CUE-to-tracks pipelines.

Each entry point takes the log level explicitly so callers decide how
verbose a run is.
"""

import os
from pathlib import Path
from typing import Callable, List, Optional

from .models import SplitResult
from ..core.cancellation import CancellationToken
from ..core.config import CueConfig
from ..core.logging_utils import get_logger, setup_logging
from ..cue.services import convert_tracklist_to_cue, parse_cue_file
from ..splitting.services import SegmentSplitter
from ..tracklist.models import TracklistEntry

log = get_logger(__name__)


def tracklist_to_cue(
    tracklist_path: Path,
    output_cue_path: Path,
    album_title: str,
    audio_file: str,
    log_level: Optional[str] = None,
) -> List[TracklistEntry]:
    """Write a CUE sheet for a tracklist. ``audio_file`` is stored verbatim."""
    setup_logging(log_level)
    return convert_tracklist_to_cue(
        tracklist_path, output_cue_path, album_title, audio_file
    )


def resolve_audio_path(cue_path: Path, audio_file_name: str) -> Path:
    """Locate the audio file a sheet refers to, relative to the sheet."""
    return (cue_path.parent / audio_file_name).resolve()


def cue_to_segments(
    cue_path: Path,
    output_folder: Path,
    log_level: Optional[str] = None,
    splitter: Optional[SegmentSplitter] = None,
    token: Optional[CancellationToken] = None,
) -> SplitResult:
    """Split the audio file referenced by a CUE sheet into per-track files."""
    setup_logging(log_level)

    log.info("Parsing CUE file: %s", cue_path)
    document = parse_cue_file(cue_path)

    audio_path = resolve_audio_path(cue_path, document.audio_file_name)
    log.info("Input audio file from CUE: %s", audio_path)
    log.info("Found %d tracks.", document.track_count)

    splitter = splitter or SegmentSplitter()
    track_files = splitter.split(audio_path, document, output_folder, token)

    return SplitResult(
        cue_path=cue_path,
        audio_path=audio_path,
        document=document,
        track_files=track_files,
    )


def sheet_reference(audio_file: Path, cue_dir: Path) -> str:
    """How a sheet written to ``cue_dir`` should name ``audio_file``."""
    try:
        return os.path.relpath(audio_file.resolve(), cue_dir.resolve())
    except ValueError:
        # different drives on Windows
        return str(audio_file.resolve())


def combined_cue_path(tracklist_path: Path, output_folder: Path) -> Path:
    return output_folder / f"{tracklist_path.stem}{CueConfig.FILE_EXTENSION}"


def tracklist_to_segments(
    tracklist_path: Path,
    audio_file: Path,
    album_title: str,
    output_folder: Path,
    log_level: Optional[str] = None,
    splitter: Optional[SegmentSplitter] = None,
    token: Optional[CancellationToken] = None,
    on_cue_written: Optional[Callable[[Path, List[TracklistEntry]], None]] = None,
) -> SplitResult:
    """Write a CUE sheet into ``output_folder`` and split the mix with it.

    ``on_cue_written`` is called with the sheet path and the parsed entries
    once the sheet exists and before any external tool runs.
    """
    setup_logging(log_level)

    cue_path = combined_cue_path(tracklist_path, output_folder)
    entries = convert_tracklist_to_cue(
        tracklist_path,
        cue_path,
        album_title,
        sheet_reference(audio_file, output_folder),
    )
    if on_cue_written is not None:
        on_cue_written(cue_path, entries)

    return cue_to_segments(
        cue_path, output_folder, log_level=log_level, splitter=splitter, token=token
    )
