"""CUE sheet domain models."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.timecode import CueTime


@dataclass
class CueIndexRecord:
    """An ``INDEX`` line as read from the sheet."""

    number: int
    time: CueTime


@dataclass
class CueTrackRecord:
    """A ``TRACK`` block as read from the sheet."""

    number: int
    track_type: str
    title: Optional[str] = None
    performer: Optional[str] = None
    songwriter: Optional[str] = None
    isrc: Optional[str] = None
    flags: List[str] = field(default_factory=list)
    pregap: Optional[CueTime] = None
    postgap: Optional[CueTime] = None
    indexes: List[CueIndexRecord] = field(default_factory=list)

    def get_index(self, number: int) -> Optional[CueIndexRecord]:
        """Return the index with the given number, if present."""
        for index in self.indexes:
            if index.number == number:
                return index
        return None


@dataclass
class CueFileRecord:
    """A ``FILE`` entry and the tracks that follow it."""

    name: str
    file_type: Optional[str] = None
    tracks: List[CueTrackRecord] = field(default_factory=list)


@dataclass
class CueSheetRecord:
    """Structure of a whole sheet, before validation."""

    title: Optional[str] = None
    performer: Optional[str] = None
    songwriter: Optional[str] = None
    catalog: Optional[str] = None
    cdtextfile: Optional[str] = None
    rem: Dict[str, str] = field(default_factory=dict)
    files: List[CueFileRecord] = field(default_factory=list)


@dataclass
class CueTrackEntry:
    """A validated track with its start time resolved to seconds."""

    track_number: int
    title: str
    performer: str
    index_time: CueTime
    start_seconds: float


@dataclass
class CueDocument:
    """A validated CUE sheet, simplified for splitting."""

    audio_file_name: str
    tracks: List[CueTrackEntry]
    album_title: Optional[str] = None
    album_performer: Optional[str] = None

    @property
    def track_count(self) -> int:
        return len(self.tracks)
