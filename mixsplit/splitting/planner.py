"""Track window planning and output file naming."""

import re
from typing import Iterable, List

from .models import TrackWindow
from ..core.logging_utils import get_logger
from ..cue.models import CueTrackEntry

log = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9\s\-_.]")
_WHITESPACE = re.compile(r"\s+")


def build_windows(
    tracks: Iterable[CueTrackEntry], total_duration: float
) -> List[TrackWindow]:
    """Compute a window per track, ordered by start time.

    Each window ends where the next one starts; the last one ends at the
    total duration. Degenerate windows are included.
    """
    ordered = sorted(tracks, key=lambda t: t.start_seconds)
    windows = []

    for i, track in enumerate(ordered):
        if i + 1 < len(ordered):
            end = ordered[i + 1].start_seconds
        else:
            end = total_duration

        windows.append(
            TrackWindow(
                track_number=track.track_number,
                title=track.title,
                performer=track.performer,
                start_seconds=track.start_seconds,
                end_seconds=end,
            )
        )

    return windows


def plan_segments(
    tracks: Iterable[CueTrackEntry], total_duration: float
) -> List[TrackWindow]:
    """Compute the windows worth extracting, skipping degenerate ones."""
    planned = []
    for window in build_windows(tracks, total_duration):
        if window.is_degenerate:
            log.warning(
                "Skipping invalid segment for track %d: start=%s, end=%s",
                window.track_number,
                window.start_seconds,
                window.end_seconds,
            )
            continue
        planned.append(window)
    return planned


def sanitize_filename_component(value: str) -> str:
    """Keep letters, digits, whitespace, hyphens, underscores and periods."""
    value = _UNSAFE_CHARS.sub("", value)
    return _WHITESPACE.sub(" ", value).strip()


def build_output_filename(performer: str, title: str, extension: str) -> str:
    """Name a track file ``<performer> - <title><extension>``."""
    return (
        f"{sanitize_filename_component(performer)} - "
        f"{sanitize_filename_component(title)}{extension}"
    )
