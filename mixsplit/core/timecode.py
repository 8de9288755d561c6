"""Conversions between tracklist timestamps, CUE frame times and seconds."""

import math
from dataclasses import dataclass

from .config import CueConfig


@dataclass(frozen=True)
class CueTime:
    """A CUE ``MM:SS:FF`` position."""

    minutes: int
    seconds: int
    frames: int

    @classmethod
    def parse(cls, value: str) -> "CueTime":
        """Parse ``MM:SS:FF`` or ``H:MM:SS:FF``.

        The four-part form comes from tracklist timestamps with an hour
        field; the hours are folded into the minutes.
        """
        parts = value.strip().split(":")
        digits = all(part.isascii() and part.isdigit() for part in parts)
        if len(parts) not in (3, 4) or not digits:
            raise ValueError(f"Invalid CUE time: {value!r}")

        numbers = [int(part) for part in parts]
        if len(numbers) == 4:
            hours, minutes, seconds, frames = numbers
            if minutes >= 60:
                raise ValueError(f"Invalid CUE time: {value!r}")
            minutes += hours * 60
        else:
            minutes, seconds, frames = numbers

        if seconds >= 60 or frames >= CueConfig.FRAMES_PER_SECOND:
            raise ValueError(f"Invalid CUE time: {value!r}")

        return cls(minutes=minutes, seconds=seconds, frames=frames)

    def __str__(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}:{self.frames:02d}"


def seconds_to_clock_string(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS.mmm`` for ffmpeg time arguments.

    Hours, minutes and seconds are floored; milliseconds are rounded from
    the fractional part of the seconds.
    """
    hours = math.floor(seconds / 3600)
    seconds %= 3600
    minutes = math.floor(seconds / 60)
    remaining = seconds % 60

    whole = math.floor(remaining)
    millis = math.floor((remaining - whole) * 1000 + 0.5)

    return f"{hours:02d}:{minutes:02d}:{whole:02d}.{millis:03d}"


def cue_frame_time_to_seconds(time: CueTime) -> float:
    """Convert a CUE frame time to seconds (75 frames per second)."""
    return time.minutes * 60 + time.seconds + time.frames / CueConfig.FRAMES_PER_SECOND


def clock_timestamp_to_frame_notation(timestamp: str) -> str:
    """Append a zero frame field to a ``MM:SS`` / ``H:MM:SS`` timestamp."""
    return timestamp + ":00"
