"""Parsing of plain-text DJ-mix tracklists."""

from pathlib import Path
from typing import List, Optional

from .models import TracklistEntry
from ..core.config import TracklistConfig
from ..core.exceptions import InputNotFoundError
from ..core.logging_utils import get_logger

log = get_logger(__name__)


def after(value: Optional[str], delimiter: str) -> str:
    """Return the text after the first ``delimiter``, or all of it if absent."""
    value = value or ""
    if value == "":
        return value

    _, found, rest = value.partition(delimiter)
    return rest if found else value


def parse_line(line: str) -> TracklistEntry:
    """Split one ``<timestamp> <artist> - <title>`` line.

    Never raises; unexpected input degrades to empty or partial fields.
    """
    timestamp = line.split(" ")[0] or TracklistConfig.DEFAULT_TIMESTAMP

    remainder = after(line, f"{timestamp} ").replace("\r", "")
    artist, found, title = remainder.partition(TracklistConfig.ARTIST_TITLE_DELIMITER)
    if not found:
        artist, title = "", remainder

    return TracklistEntry(timestamp=timestamp, artist=artist, title=title)


def parse_tracklist(tracklist: str) -> List[TracklistEntry]:
    """Parse tracklist text into entries in file order.

    The first entry always starts at ``00:00``: a mix begins at zero no
    matter what the first line says.
    """
    entries = [parse_line(line) for line in tracklist.strip().split("\n")]
    if entries:
        entries[0].timestamp = TracklistConfig.FIRST_TIMESTAMP
    return entries


def load_tracklist(path: Path) -> List[TracklistEntry]:
    """Read and parse a tracklist file."""
    if not path.is_file():
        raise InputNotFoundError(f"Tracklist file not found: {path}", file_path=str(path))

    text = path.read_text(encoding=TracklistConfig.ENCODING, errors="replace")
    entries = parse_tracklist(text)
    log.debug("Parsed %d tracklist entries from %s", len(entries), path)
    return entries
