"""Tracklist domain models."""

from dataclasses import dataclass


@dataclass
class TracklistEntry:
    """One line of a mix tracklist."""

    timestamp: str
    artist: str
    title: str
