"""Pipeline result models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..cue.models import CueDocument
from ..splitting.models import TrackFile


@dataclass
class SplitResult:
    """Outcome of splitting a recording along a CUE sheet."""

    cue_path: Path
    audio_path: Path
    document: CueDocument
    track_files: List[TrackFile] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        """Tracks that produced no file."""
        return self.document.track_count - len(self.track_files)
