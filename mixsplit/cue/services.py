"""CUE sheet generation from tracklists and reading of CUE sheets for splitting."""

from pathlib import Path
from typing import List, Optional

from .grammar import CueGrammarError, parse_cue_sheet
from .models import CueDocument, CueSheetRecord, CueTrackEntry
from ..core.config import CueConfig, Paths
from ..core.exceptions import InputNotFoundError, MalformedCueError
from ..core.logging_utils import get_logger
from ..core.timecode import clock_timestamp_to_frame_notation, cue_frame_time_to_seconds
from ..tracklist.models import TracklistEntry
from ..tracklist.services import load_tracklist

log = get_logger(__name__)


def generate_cue_content(
    tracks: List[TracklistEntry], album_title: str, filename: str
) -> str:
    """Render tracklist entries as CUE sheet text.

    Quotes inside titles and artists are written as-is.
    """
    lines = [
        f'TITLE "{album_title}"',
        f'FILE "{filename}" {CueConfig.AUDIO_FORMAT_TAG}',
    ]

    for number, track in enumerate(tracks, 1):
        lines.append(f"\tTRACK {number:02d} {CueConfig.TRACK_TYPE}")
        lines.append(f'\t\tTITLE "{track.title}"')
        lines.append(f'\t\tPERFORMER "{track.artist}"')
        index_time = clock_timestamp_to_frame_notation(track.timestamp)
        lines.append(f"\t\tINDEX {CueConfig.PRIMARY_INDEX:02d} {index_time}")

    return "\n".join(lines).rstrip() + "\n"


def convert_tracklist_to_cue(
    tracklist_path: Path, output_cue_path: Path, album_title: str, audio_filename: str
) -> List[TracklistEntry]:
    """Write a CUE sheet for a tracklist file and return the parsed entries."""
    tracks = load_tracklist(tracklist_path)
    content = generate_cue_content(tracks, album_title, audio_filename)

    Paths.ensure_dir(output_cue_path.parent)
    output_cue_path.write_text(content, encoding=CueConfig.ENCODING)

    log.info("Successfully created CUE file at: %s", output_cue_path)
    return tracks


def build_document(sheet: CueSheetRecord, cue_path: Optional[Path] = None) -> CueDocument:
    """Validate a parsed sheet and reduce it to what splitting needs.

    Only the first FILE entry is used. Tracks without INDEX 01 are dropped;
    the rest are ordered by start time.
    """
    where = str(cue_path) if cue_path else "<text>"

    if not sheet.files:
        raise MalformedCueError(
            f"No file entries found in CUE sheet: {where}", file_path=where
        )

    audio_file = sheet.files[0]
    if not audio_file.tracks:
        raise MalformedCueError(
            f"No tracks found for audio file '{audio_file.name}' in CUE sheet: {where}",
            file_path=where,
        )

    tracks: List[CueTrackEntry] = []
    for track in audio_file.tracks:
        index = track.get_index(CueConfig.PRIMARY_INDEX)
        if index is None:
            log.warning("Track %d is missing INDEX 01. Skipping.", track.number)
            continue

        tracks.append(
            CueTrackEntry(
                track_number=track.number,
                title=track.title or "",
                performer=track.performer or CueConfig.UNKNOWN_ARTIST,
                index_time=index.time,
                start_seconds=cue_frame_time_to_seconds(index.time),
            )
        )

    if not tracks:
        raise MalformedCueError(
            f"No track with INDEX 01 in CUE sheet: {where}", file_path=where
        )

    tracks.sort(key=lambda t: t.start_seconds)

    return CueDocument(
        audio_file_name=audio_file.name,
        tracks=tracks,
        album_title=sheet.title,
        album_performer=sheet.performer,
    )


def parse_cue_file(cue_path: Path) -> CueDocument:
    """Read a CUE sheet from disk into a validated ``CueDocument``."""
    if not cue_path.is_file():
        raise InputNotFoundError(f"CUE file not found: {cue_path}", file_path=str(cue_path))

    try:
        sheet = parse_cue_sheet(cue_path)
    except CueGrammarError as e:
        raise MalformedCueError(
            "Error parsing CUE file", file_path=str(cue_path), details=str(e)
        )

    log.debug("Parsed CUE sheet %s: %r", cue_path, sheet)
    return build_document(sheet, cue_path)
