"""Splitting domain models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ..core.timecode import seconds_to_clock_string


@dataclass
class TrackWindow:
    """The ``[start, end)`` span of one track in the source recording."""

    track_number: int
    title: str
    performer: str
    start_seconds: float
    end_seconds: float

    @property
    def duration(self) -> float:
        """Length of the window in seconds."""
        return self.end_seconds - self.start_seconds

    @property
    def is_degenerate(self) -> bool:
        """True when the window has no positive length."""
        return self.start_seconds >= self.end_seconds


@dataclass
class ExtractionRequest:
    """One lossless copy of a time range into its own file."""

    input_path: Path
    start_seconds: float
    duration_seconds: float
    output_path: Path
    overwrite: bool = True
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def start(self) -> str:
        return seconds_to_clock_string(self.start_seconds)

    @property
    def duration(self) -> str:
        return seconds_to_clock_string(self.duration_seconds)


@dataclass
class TrackFile:
    """Represents a written track file."""

    track_number: int
    file_path: Path
    duration: str
    title: Optional[str] = None

    @property
    def filename(self) -> str:
        """Just the filename without path."""
        return self.file_path.name
