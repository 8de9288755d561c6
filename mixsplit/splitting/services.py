"""Splitting of a recording into per-track files along CUE boundaries."""

from pathlib import Path
from typing import Dict, List, Optional

from .models import ExtractionRequest, TrackFile, TrackWindow
from .planner import build_output_filename, plan_segments
from .tools import FFmpegExtractor, FFprobeDurationProbe
from ..core.cancellation import CancellationToken
from ..core.config import Paths
from ..core.exceptions import InputNotFoundError, MalformedCueError
from ..core.logging_utils import get_logger
from ..core.timecode import seconds_to_clock_string
from ..cue.models import CueDocument

log = get_logger(__name__)


class SegmentSplitter:
    """Drives the duration probe and the extractor over a CUE document."""

    def __init__(
        self,
        probe: Optional[FFprobeDurationProbe] = None,
        extractor: Optional[FFmpegExtractor] = None,
    ):
        self.probe = probe or FFprobeDurationProbe()
        self.extractor = extractor or FFmpegExtractor()

    @staticmethod
    def build_metadata(window: TrackWindow, document: CueDocument) -> Dict[str, str]:
        """Tags written into each output file."""
        return {
            "track": str(window.track_number),
            "title": window.title,
            "artist": window.performer,
            "album": document.album_title or "",
            "album_artist": document.album_performer or "",
        }

    def build_request(
        self,
        input_path: Path,
        window: TrackWindow,
        document: CueDocument,
        output_dir: Path,
    ) -> ExtractionRequest:
        filename = build_output_filename(window.performer, window.title, input_path.suffix)
        return ExtractionRequest(
            input_path=input_path,
            start_seconds=window.start_seconds,
            duration_seconds=window.duration,
            output_path=output_dir / filename,
            overwrite=True,
            metadata=self.build_metadata(window, document),
        )

    def split(
        self,
        input_path: Path,
        document: CueDocument,
        output_dir: Path,
        token: Optional[CancellationToken] = None,
    ) -> List[TrackFile]:
        """Extract every non-empty track window of ``input_path`` into ``output_dir``.

        Tracks are processed one after another in start order. The first
        failure stops the run; files written before it are kept.
        """
        if not input_path.is_file():
            raise InputNotFoundError(
                f"Input audio file not found: {input_path}", file_path=str(input_path)
            )

        if not document.tracks:
            raise MalformedCueError("No tracks provided for splitting.")

        log.info("Starting to split: %s", input_path)
        log.info("Number of tracks to split: %d", document.track_count)

        Paths.ensure_dir(output_dir)
        log.debug("Ensured output directory exists: %s", output_dir)

        total_duration = self.probe.get_duration(input_path, token)
        log.info("Total duration of input file: %.2f seconds", total_duration)

        track_files: List[TrackFile] = []
        written: Dict[Path, int] = {}

        for window in plan_segments(document.tracks, total_duration):
            request = self.build_request(input_path, window, document, output_dir)

            if request.output_path in written:
                log.warning(
                    "Track %d overwrites %s written for track %d",
                    window.track_number,
                    request.output_path.name,
                    written[request.output_path],
                )

            log.debug(
                'Processing track %d: "%s" (from %s for %s)',
                window.track_number,
                window.title,
                request.start,
                request.duration,
            )

            self.extractor.extract(request, token)
            written[request.output_path] = window.track_number
            log.info("Successfully created: %s", request.output_path.name)

            track_files.append(
                TrackFile(
                    track_number=window.track_number,
                    file_path=request.output_path,
                    duration=seconds_to_clock_string(window.duration),
                    title=window.title,
                )
            )

        return track_files
