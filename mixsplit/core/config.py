"""Configuration constants and settings for mixsplit."""

import os
from pathlib import Path
from typing import Optional


class CueConfig:
    """CUE sheet constants."""

    FRAMES_PER_SECOND = 75  # Red Book audio CD frame rate
    AUDIO_FORMAT_TAG = "MP3"
    TRACK_TYPE = "AUDIO"
    PRIMARY_INDEX = 1
    UNKNOWN_ARTIST = "Unknown Artist"
    FILE_EXTENSION = ".cue"
    ENCODING = "utf-8"


class TracklistConfig:
    """Tracklist text conventions."""

    FIRST_TIMESTAMP = "00:00"
    DEFAULT_TIMESTAMP = "0:00"
    ARTIST_TITLE_DELIMITER = " - "
    ENCODING = "utf-8"


class ToolConfig:
    """External tool settings."""

    DEFAULT_FFMPEG = "ffmpeg"
    DEFAULT_FFPROBE = "ffprobe"
    DEFAULT_TIMEOUT_SECONDS = 600.0

    @staticmethod
    def ffmpeg() -> str:
        """Name or path of the ffmpeg binary."""
        return os.getenv("MIXSPLIT_FFMPEG") or ToolConfig.DEFAULT_FFMPEG

    @staticmethod
    def ffprobe() -> str:
        """Name or path of the ffprobe binary."""
        return os.getenv("MIXSPLIT_FFPROBE") or ToolConfig.DEFAULT_FFPROBE

    @staticmethod
    def timeout() -> Optional[float]:
        """Per-process timeout in seconds, None when disabled."""
        raw = os.getenv("MIXSPLIT_TOOL_TIMEOUT")
        if raw is None or not raw.strip():
            return ToolConfig.DEFAULT_TIMEOUT_SECONDS
        try:
            value = float(raw)
        except ValueError:
            return ToolConfig.DEFAULT_TIMEOUT_SECONDS
        return value if value > 0 else None


class LoggingConfig:
    """Log output settings."""

    DEFAULT_LEVEL = "INFO"
    FORMAT = "%(message)s"
    DATE_FORMAT = "[%X]"

    @staticmethod
    def level() -> str:
        """Log level name from the environment."""
        return (os.getenv("MIXSPLIT_LOG_LEVEL") or LoggingConfig.DEFAULT_LEVEL).upper()


class AppInfo:
    """Application metadata."""

    NAME = "mixsplit"
    VERSION = "1.0.0"
    DESCRIPTION = "Turn DJ-mix tracklists into CUE sheets and split mixes into tracks"
    TOOLS_HINT = (
        'Please ensure you have "ffmpeg" and "ffprobe" installed and available '
        "in your system's PATH, and that the CUE file and its referenced audio "
        "file exist."
    )


class Paths:
    """Filesystem helpers."""

    @staticmethod
    def ensure_dir(path: Path) -> Path:
        """Ensure directory exists and return it."""
        path.mkdir(parents=True, exist_ok=True)
        return path
